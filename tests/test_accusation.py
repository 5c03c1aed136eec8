"""
Tests for clue attribution counting and the verdict.
"""
import pytest

from accusation import clamp_accused_name, count_clues, evaluate_accusation, list_clues
from clue_catalog import ClueCatalog
from suspect_index import SuspectIndex


def make_catalog(*clues):
    catalog = ClueCatalog()
    for clue in clues:
        catalog.add(clue)
    return catalog


@pytest.fixture
def evidence():
    return SuspectIndex.from_pairs([
        ("mud", "Ann"),
        ("ash", "Ann"),
        ("wax", "Bob"),
        ("ink", "Ann"),
    ])


def test_empty_catalog_counts_zero(evidence):
    assert count_clues(ClueCatalog(), evidence, "Ann") == 0
    assert list(list_clues(ClueCatalog(), evidence, "Ann")) == []


def test_count_matches_attributions(evidence):
    catalog = make_catalog("wax", "mud", "ash")
    assert count_clues(catalog, evidence, "Ann") == 2
    assert count_clues(catalog, evidence, "Bob") == 1
    assert count_clues(catalog, evidence, "Cy") == 0


def test_list_is_ascending(evidence):
    catalog = make_catalog("mud", "wax", "ink", "ash")
    assert list(list_clues(catalog, evidence, "Ann")) == ["ash", "ink", "mud"]


def test_unindexed_clue_never_counts(evidence):
    catalog = make_catalog("mud", "soot")
    assert count_clues(catalog, evidence, "Ann") == 1


def test_match_is_case_sensitive(evidence):
    catalog = make_catalog("mud", "ash")
    assert count_clues(catalog, evidence, "ann") == 0
    assert count_clues(catalog, evidence, "Ann ") == 0


def test_verdict_threshold(evidence):
    catalog = make_catalog("mud", "ash", "wax")
    convicted = evaluate_accusation(catalog, evidence, "Ann")
    assert convicted.convicted
    assert convicted.clue_count == 2
    assert convicted.matching_clues == ["ash", "mud"]
    assert convicted.threshold == 2

    acquitted = evaluate_accusation(catalog, evidence, "Bob")
    assert not acquitted.convicted
    assert acquitted.clue_count == 1


def test_verdict_custom_threshold(evidence):
    catalog = make_catalog("mud", "ash")
    assert not evaluate_accusation(catalog, evidence, "Ann", threshold=3).convicted
    assert evaluate_accusation(catalog, evidence, "Bob", threshold=0).convicted


def test_evaluation_does_not_change_catalog(evidence):
    catalog = make_catalog("mud", "ash")
    evaluate_accusation(catalog, evidence, "Ann")
    assert list(catalog) == ["ash", "mud"]


@pytest.mark.parametrize("raw, expected", [
    ("Mordomo James\n", "Mordomo James"),
    ("  Chef Marcel  ", "Chef Marcel"),
    ("", ""),
    ("x" * 60, "x" * 49),
])
def test_clamp_accused_name(raw, expected):
    assert clamp_accused_name(raw) == expected


def test_clamp_does_not_split_characters():
    name = clamp_accused_name("é" * 30, max_bytes=49)
    assert name == "é" * 24
    assert len(name.encode("utf-8")) <= 49


def test_clamp_replaces_undecodable_characters():
    # input() hands back lone surrogates for bytes that are not valid UTF-8
    assert clamp_accused_name("Mordomo \udcff") == "Mordomo ?"


def test_clamp_bounds_names_with_undecodable_characters():
    name = clamp_accused_name("\udcff" * 60)
    assert name == "?" * 49
    assert len(name.encode("utf-8")) <= 49
