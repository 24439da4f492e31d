import json

import libsbml
import networkx as nx
import pytest
from click.testing import CliRunner

from pathwayqual.cli import _get_output_name, main

PATHWAY = {
    "name": "hsa00010",
    "entries": [
        {"id": 1, "name": "cpd:C00031", "type": "compound", "graphics": {"name": "C00031"}},
        {"id": 2, "name": "hsa:3098", "type": "gene", "graphics": {"name": "HK1, HXK1", "bgcolor": "#BFFFBF"}},
        {"id": 3, "name": "hsa:3099", "type": "gene", "graphics": {"name": "HK2", "bgcolor": "#FFFFFF"}},
    ],
    "relations": [{"entry1": 1, "entry2": 2, "subtypes": ["activation"]}],
}

ANNOTATIONS = {
    "cpd:C00031": {"names": "D-Glucose, Glucose", "formula": "C6H12O6"},
    "hsa:3098": {"names": "HK1; HXK1"},
}


@pytest.fixture
def inputs(tmp_path):
    pathway = tmp_path / "hsa00010.json"
    pathway.write_text(json.dumps(PATHWAY))
    annotations = tmp_path / "annotations.json"
    annotations.write_text(json.dumps(ANNOTATIONS))
    return pathway, annotations


def test_output_name():
    assert _get_output_name("maps/hsa00010.json", ".qual.sbml") == "maps/hsa00010.qual.sbml"
    assert _get_output_name("hsa00010.kgml", ".graphml") == "hsa00010.kgml.graphml"


def test_translate_to_qual(inputs, tmp_path):
    pathway, annotations = inputs
    result = CliRunner().invoke(main, ["translate", str(pathway), "--annotations", str(annotations)])
    assert result.exit_code == 0, result.output
    output = tmp_path / "hsa00010.qual.sbml"
    assert output.exists()
    text = output.read_text()
    assert text.splitlines()[1].startswith("<!-- Created by PathwayQual")
    doc = libsbml.readSBMLFromString(text)
    qual_model = doc.getModel().getPlugin("qual")
    # the white node is not part of the organism
    assert qual_model.getNumQualitativeSpecies() == 2
    assert qual_model.getQualitativeSpecies("qual_Glucose") is not None
    assert qual_model.getNumTransitions() == 1


def test_translate_to_graphml(inputs, tmp_path):
    pathway, _ = inputs
    output = tmp_path / "out.graphml"
    result = CliRunner().invoke(main, [
        "translate", str(pathway), str(output), "--format", "graphml", "--offline", "--keep-generic-nodes",
    ])
    assert result.exit_code == 0, result.output
    graph = nx.read_graphml(str(output))
    assert graph.number_of_nodes() == 3
    assert graph.nodes["n2"]["label"] == "HK1"


def test_invalid_input_is_reported(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("[]")
    result = CliRunner().invoke(main, ["translate", str(broken)])
    assert result.exit_code == 1
    assert "Empty or invalid input file" in result.output


def test_unknown_naming_mode_is_rejected(inputs):
    pathway, _ = inputs
    result = CliRunner().invoke(main, ["translate", str(pathway), "--naming", "longest"])
    assert result.exit_code == 2


def test_malformed_entry_is_reported(tmp_path):
    pathway = tmp_path / "malformed.json"
    pathway.write_text(json.dumps({"name": "x", "entries": [{"name": "hsa:1"}]}))
    result = CliRunner().invoke(main, ["translate", str(pathway)])
    assert result.exit_code == 1
    assert "Malformed pathway x" in result.output
