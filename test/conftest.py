from __future__ import annotations

import pytest

from pathwayqual import constants
from pathwayqual.annotations import CachedAnnotationLookup
from pathwayqual.types import AnnotationRecord, Entry, Graphics, Pathway, Reaction, ReactionComponent, Relation, SubType


def make_relation(entry1: int, entry2: int, *subtypes: str) -> Relation:
    return Relation(entry1=entry1, entry2=entry2, type="PPrel", subtypes=[SubType(name=s) for s in subtypes])


@pytest.fixture
def glucose_lookup() -> CachedAnnotationLookup:
    return CachedAnnotationLookup({
        "cpd:C00031": AnnotationRecord("cpd:C00031", True, names="D-Glucose, Glucose", formula="C6H12O6"),
        "hsa:3098": AnnotationRecord("hsa:3098", True, names="HK1; HXK1", ec_codes=["2.7.1.1"]),
    })


@pytest.fixture
def glucose_pathway() -> Pathway:
    return Pathway(
        name="hsa00010",
        org="hsa",
        title="Glycolysis / Gluconeogenesis",
        entries=[
            Entry(1, "cpd:C00031", constants.ENTRY_COMPOUND, Graphics(name="C00031", x=10, y=20)),
            Entry(2, "hsa:3098", constants.ENTRY_GENE, Graphics(name="HK1, HXK1", bgcolor="#BFFFBF")),
        ],
        relations=[make_relation(1, 2, constants.SUBTYPE_ACTIVATION)],
    )


@pytest.fixture
def reaction_lookup() -> CachedAnnotationLookup:
    return CachedAnnotationLookup({
        "rn:R00299": AnnotationRecord(
            "rn:R00299", True, names="ATP:D-glucose 6-phosphotransferase",
            equation="C00002 + C00031 <=> C00008 + C00092", enzymes=["2.7.1.1"],
        ),
        "cpd:C00002": AnnotationRecord("cpd:C00002", True, names="ATP; Adenosine 5'-triphosphate", formula="C10H16N5O13P3"),
        "cpd:C00008": AnnotationRecord("cpd:C00008", True, names="ADP; Adenosine 5'-diphosphate", formula="C10H15N5O10P2"),
        "cpd:C00031": AnnotationRecord("cpd:C00031", True, names="D-Glucose; Grape sugar", formula="C6H12O6"),
        "cpd:C00092": AnnotationRecord("cpd:C00092", True, names="D-Glucose 6-phosphate", formula="C6H13O9P"),
    })


@pytest.fixture
def reaction_pathway() -> Pathway:
    return Pathway(
        name="hsa00010",
        entries=[
            Entry(1, "cpd:C00031", constants.ENTRY_COMPOUND),
            Entry(2, "cpd:C00092", constants.ENTRY_COMPOUND),
        ],
        reactions=[
            Reaction(
                "rn:R00299", "irreversible",
                substrates=[ReactionComponent("cpd:C00031", 1)],
                products=[ReactionComponent("cpd:C00092", 2)],
            )
        ],
    )
