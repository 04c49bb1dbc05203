"""
TesisBul facility finder.

Filter a fixed catalog of sports and cultural facilities by city, district,
facility type and accepted card type, and rank the result by distance to the
user or by name.
"""
