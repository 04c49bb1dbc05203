from facility_finder.catalog.models import Facility
from facility_finder.search.facets import build_facets
from facility_finder.search.models import FacetIndex, FilterSelection

CATALOG = [
    Facility(id="1", name="Aqua Center", city="Istanbul", district="Kadikoy", type="Pool",
             card_types=("CardA",), lat=40.98, lng=29.03),
    Facility(id="2", name="Beta Gym", city="Istanbul", district="Besiktas", type="Gym",
             card_types=("Tümü",), lat=41.04, lng=29.00),
    Facility(id="3", name="Cankaya Pist", city="Ankara", district="Cankaya", type="Athletics",
             card_types=("CardA", "CardC"), lat=39.92, lng=32.85),
    Facility(id="4", name="Kadikoy Salon", city="Istanbul", district="Kadikoy", type="Gym",
             card_types=(), lat=40.99, lng=29.02),
    Facility(id="5", name="Unknown Spot", city="Ankara", district="", type="Diğer",
             card_types=("CardB",), lat=39.95, lng=32.80),
]


def test_whole_catalog_facets():
    facets = build_facets(CATALOG)

    assert facets.cities == ("Ankara", "Istanbul")
    assert facets.types == ("Athletics", "Diğer", "Gym", "Pool")
    assert facets.card_types == ("CardA", "CardB", "CardC", "Tümü")


def test_districts_empty_until_city_selected():
    assert build_facets(CATALOG).districts == ()
    assert build_facets(CATALOG, city=None).districts == ()


def test_districts_restricted_to_selected_city():
    assert build_facets(CATALOG, city="Istanbul").districts == ("Besiktas", "Kadikoy")
    # empty district strings are not offered
    assert build_facets(CATALOG, city="Ankara").districts == ("Cankaya",)
    assert build_facets(CATALOG, city="Izmir").districts == ()


def test_other_facets_ignore_city():
    assert build_facets(CATALOG, city="Ankara").types == build_facets(CATALOG).types
    assert build_facets(CATALOG, city="Ankara").cities == ("Ankara", "Istanbul")


def test_empty_catalog():
    assert build_facets([]) == FacetIndex()
    assert build_facets([], city="Istanbul") == FacetIndex()


def test_invalid_fields():
    facets = build_facets(CATALOG, city="Istanbul")

    assert facets.invalid_fields(FilterSelection()) == []
    assert facets.invalid_fields(FilterSelection(city="Istanbul", district="Kadikoy")) == []
    assert facets.invalid_fields(FilterSelection(city="Istanbul", district="Cankaya")) == ["district"]
    assert facets.invalid_fields(FilterSelection(type="Chess", card_type="CardZ")) == ["type", "card_type"]
