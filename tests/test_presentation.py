from models import TipState
from presentation import (
    COPY_HINT,
    amount_prefix,
    build_result_rows,
    copied_message,
    percentage_label,
    split_label,
)


def _values(rows):
    return {row.title: row.value for row in rows}


def test_percentage_labels(settings):
    assert [percentage_label(p) for p in settings.percentage_options] == [
        "0%", "5%", "10%", "15%", "20%", "25%", "30%"
    ]


def test_split_label_pluralizes():
    assert split_label(1) == "1 person"
    assert split_label(2) == "2 people"
    assert split_label(10) == "10 people"


def test_amount_prefix_only_when_text_entered(en_us_formatter):
    assert amount_prefix("", en_us_formatter) == ""
    assert amount_prefix("1", en_us_formatter) == "$"
    assert amount_prefix("abc", en_us_formatter) == "$"


def test_single_person_has_no_per_person_row(en_us_formatter):
    rows = build_result_rows(TipState("100", 20, 1), en_us_formatter)
    assert _values(rows) == {
        "Base amount": "$100.00",
        "Added percentage (20%)": "$20.00",
        "Total": "$120.00",
    }


def test_split_adds_per_person_row(en_us_formatter):
    rows = build_result_rows(TipState("90", 15, 3), en_us_formatter)
    assert _values(rows) == {
        "Base amount": "$90.00",
        "Added percentage (15%)": "$13.50",
        "Total": "$103.50",
        "Per person (x3)": "$34.50",
    }


def test_empty_amount_renders_zeroes(en_us_formatter):
    rows = build_result_rows(TipState("", 20, 1), en_us_formatter)
    assert [row.value for row in rows] == ["$0.00", "$0.00", "$0.00"]


def test_ten_people_no_tip(en_us_formatter):
    rows = build_result_rows(TipState("1000", 0, 10), en_us_formatter)
    assert _values(rows) == {
        "Base amount": "$1,000.00",
        "Added percentage (0%)": "$0.00",
        "Total": "$1,000.00",
        "Per person (x10)": "$100.00",
    }


def test_emphasis_and_hints(en_us_formatter):
    rows = build_result_rows(TipState("10", 10, 2), en_us_formatter)
    assert [row.emphasize for row in rows] == [False, False, True, True]
    assert all(row.hint == COPY_HINT for row in rows)


def test_rendering_is_repeatable(en_us_formatter):
    state = TipState("57,25", 25, 4)
    assert build_result_rows(state, en_us_formatter) == build_result_rows(state, en_us_formatter)


def test_fallback_formatting(fallback_formatter):
    rows = build_result_rows(TipState("12,50", 20, 1), fallback_formatter)
    assert [row.value for row in rows] == ["$12.50", "$2.50", "$15.00"]


def test_copied_message(en_us_formatter):
    row = build_result_rows(TipState("1", 0, 1), en_us_formatter)[2]
    assert copied_message(row) == "Total copied"


def test_huge_amount_renders(en_us_formatter):
    rows = build_result_rows(TipState("1e27", 20, 1), en_us_formatter)
    assert rows[0].value == "$1" + ",000" * 9 + ".00"
    assert all(row.value.startswith("$") and row.value.endswith(".00") for row in rows)


def test_largest_float_amount_renders(en_us_formatter):
    rows = build_result_rows(TipState("1.7e308", 30, 1), en_us_formatter)
    assert len(rows) == 3
    assert rows[0].value.startswith("$170,")
    assert rows[0].value.endswith(".00")


def test_huge_amount_through_store(store, en_us_formatter):
    rendered = []
    store.subscribe(lambda state: rendered.append(build_result_rows(state, en_us_formatter)), notify=False)
    store.set_amount_text("1" + "0" * 26)
    assert rendered[-1][0].value == "$100" + ",000" * 8 + ".00"
