import json

import pytest

from pathwayqual import constants
from pathwayqual.options import NamingMode, TranslatorOptions
from pathwayqual.pathway_io import pathway_from_dict, read_annotations, read_pathways


def test_pathway_from_dict():
    pathway = pathway_from_dict({
        "name": "hsa04010",
        "title": "MAPK signaling pathway",
        "entries": [
            {"id": 1, "name": "hsa:5594 hsa:5595", "type": "gene", "graphics": {"name": "MAPK1", "x": 5, "y": 6}},
            {"id": 2, "name": "undefined", "type": "group", "components": [1]},
        ],
        "relations": [
            {"entry1": 1, "entry2": 2, "type": "PPrel",
             "subtypes": ["activation", {"name": "phosphorylation", "value": "+p"}],
             "xrefs": [["pubmed", "12345"]], "source": "KEGG"},
        ],
        "reactions": [
            {"name": "rn:R00299", "type": "irreversible",
             "substrates": ["cpd:C00031"], "products": [{"name": "cpd:C00092", "id": 3, "stoichiometry": 2}]},
        ],
    })
    gene, group = pathway.entries
    assert gene.identifiers() == ["hsa:5594", "hsa:5595"]
    assert gene.graphics.x == 5
    assert group.is_group()
    assert group.type == constants.ENTRY_GROUP
    relation = pathway.relations[0]
    assert relation.subtype_names() == ["activation", "phosphorylation"]
    assert relation.xrefs == [("pubmed", "12345")]
    reaction = pathway.reactions[0]
    assert not reaction.is_reversible()
    assert reaction.products[0].stoichiometry == 2
    assert not reaction.substrates[0].is_set_stoichiometry()


def test_duplicate_entry_ids_are_rejected():
    with pytest.raises(ValueError):
        pathway_from_dict({"name": "p", "entries": [
            {"id": 1, "name": "cpd:C00031", "type": "compound"},
            {"id": 1, "name": "cpd:C00092", "type": "compound"},
        ]})


@pytest.mark.parametrize("data", [
    {"name": "x", "entries": [{"name": "hsa:1"}]},
    {"name": "x", "relations": [{"entry2": 1}]},
    {"name": "x", "entries": [{"id": 1, "name": "hsa:1", "graphics": {"label": "HK1"}}]},
    {"name": "x", "reactions": [{"type": "reversible"}]},
    {"name": "x", "entries": ["hsa:1"]},
])
def test_malformed_pathway_is_rejected(data):
    with pytest.raises(ValueError):
        pathway_from_dict(data)


def test_read_pathways_accepts_lists(tmp_path):
    path = tmp_path / "pathways.json"
    path.write_text(json.dumps([{"name": "a"}, {"name": "b"}]))
    assert [p.name for p in read_pathways(str(path))] == ["a", "b"]


def test_read_annotations(tmp_path):
    path = tmp_path / "annotations.json"
    path.write_text(json.dumps({
        "cpd:C00031": {"names": "D-Glucose; Grape sugar", "formula": "C6H12O6"},
        "hsa:9999": {"success": False},
    }))
    lookup = read_annotations(str(path))
    assert len(lookup) == 2
    assert lookup.lookup("cpd:C00031").formula == "C6H12O6"
    assert not lookup.lookup("hsa:9999").success
    assert not lookup.lookup("cpd:C99999").success


def test_naming_mode_parse():
    assert NamingMode.parse("Intelligent_With_EC") is NamingMode.INTELLIGENT_WITH_EC
    with pytest.raises(ValueError):
        NamingMode.parse("longest-name")


def test_options_from_dict():
    options = TranslatorOptions.from_dict({"retrieve_annotations": False, "naming_mode": "first-name"})
    assert options.offline
    assert options.naming_mode is NamingMode.FIRST_NAME
    with pytest.raises(ValueError):
        TranslatorOptions.from_dict({"retrieve": False})
