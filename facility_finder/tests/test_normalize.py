import json
import logging
from pathlib import Path

from facility_finder.catalog import data_store
from facility_finder.catalog.config import CatalogConfig
from facility_finder.catalog.data_store import FRAME_COLUMNS, get_catalog, load_catalog, reset_catalog, to_frame
from facility_finder.catalog.models import Facility
from facility_finder.catalog.normalize import normalize_catalog, normalize_record

RAW_RECORD = {
    "id": 17,
    "name": "Moda Yüzme Havuzu",
    "city": "İstanbul",
    "cityDistrict": "Kadıköy",
    "activityGroups": [{"name": "Yüzme"}, {"name": "Su Topu"}],
    "cards": ["Spor Kart", "Tümü"],
    "lat": 40.98,
    "lng": 29.03,
    "address": "Moda Cad. No:1",
    "thumbnail": "https://example.org/moda.jpg",
}


def test_normalize_record_maps_every_field():
    facility = normalize_record(RAW_RECORD)

    assert facility == Facility(
        id="17",
        name="Moda Yüzme Havuzu",
        city="İstanbul",
        district="Kadıköy",
        type="Yüzme",
        card_types=("Spor Kart", "Tümü"),
        lat=40.98,
        lng=29.03,
        address="Moda Cad. No:1",
        image="https://example.org/moda.jpg",
    )


def test_missing_category_falls_back_to_other_label():
    for groups in (None, [], [{}], [{"name": ""}]):
        raw = {**RAW_RECORD, "activityGroups": groups}
        assert normalize_record(raw).type == "Diğer"


def test_placeholder_label_is_configurable():
    raw = {**RAW_RECORD, "activityGroups": None}
    assert normalize_record(raw, CatalogConfig(other_type_label="Other")).type == "Other"


def test_missing_cards_and_thumbnail_degrade_to_defaults():
    raw = {k: v for k, v in RAW_RECORD.items() if k not in ("cards", "thumbnail")}
    facility = normalize_record(raw)

    assert facility.card_types == ()
    assert facility.image is None

    assert normalize_record({**RAW_RECORD, "cards": None}).card_types == ()


def test_unusable_coordinate_is_logged_not_raised(caplog):
    with caplog.at_level(logging.WARNING):
        facility = normalize_record({**RAW_RECORD, "lat": None})

    assert facility.lat == 0.0
    assert "unusable lat" in caplog.text


def test_normalize_catalog_keeps_first_of_duplicate_ids(caplog):
    records = [RAW_RECORD, {**RAW_RECORD, "name": "Kopya"}, {**RAW_RECORD, "id": 18}]

    with caplog.at_level(logging.WARNING):
        facilities = normalize_catalog(records)

    assert [f.id for f in facilities] == ["17", "18"]
    assert facilities[0].name == "Moda Yüzme Havuzu"
    assert "Duplicate facility id 17" in caplog.text


def test_load_catalog_reads_json_file(tmp_path: Path):
    path = tmp_path / "tesisler.json"
    path.write_text(json.dumps([RAW_RECORD]), encoding="utf-8")

    facilities = load_catalog(path)

    assert len(facilities) == 1
    assert facilities[0].city == "İstanbul"


def test_bundled_catalog_loads_once():
    reset_catalog()
    try:
        first = get_catalog()
        assert len(first) > 0
        assert all(isinstance(f, Facility) for f in first)
        assert get_catalog() is first
    finally:
        reset_catalog()
    assert data_store._catalog is None


def test_to_frame_preserves_catalog_positions():
    facilities = normalize_catalog([RAW_RECORD, {**RAW_RECORD, "id": 18}])
    df = to_frame(facilities)

    assert list(df.columns) == FRAME_COLUMNS
    assert df.index.tolist() == [0, 1]
    assert df.loc[1, "id"] == "18"


def test_to_frame_of_empty_catalog_has_columns():
    df = to_frame([])
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_malformed_optional_fields_never_raise():
    odd_groups = [
        {"name": "Yüzme"},
        "Yüzme",
        [["Yüzme"]],
        [{"name": 42}],
    ]
    types = [normalize_record({**RAW_RECORD, "activityGroups": g}).type for g in odd_groups]
    assert types == ["Diğer", "Diğer", "Diğer", "42"]

    assert normalize_record({**RAW_RECORD, "cards": "Spor Kart"}).card_types == ("Spor Kart",)
    assert normalize_record({**RAW_RECORD, "cards": {"a": 1}}).card_types == ()
    assert normalize_record({**RAW_RECORD, "cards": ["Spor Kart", None, 7]}).card_types == ("Spor Kart", "7")
