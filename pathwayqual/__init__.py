__all__ = [
    "translate",
    "translate_file",
    "preprocess",
    "EntryNamer",
    "IdentifierAllocator",
    "TransitionBuilder",
    "TranslatorOptions",
    "NamingMode",
    "SBMLQualVariant",
    "SBMLModelVariant",
    "GraphVariant",
    "CachedAnnotationLookup",
]

from .constants import VERSION
from .annotations import CachedAnnotationLookup
from .graph import GraphVariant
from .ids import IdentifierAllocator
from .naming import EntryNamer
from .options import NamingMode, TranslatorOptions
from .preprocess import preprocess
from .sbml_model import SBMLModelVariant
from .sbml_qual import SBMLQualVariant
from .transitions import TransitionBuilder
from .translator import translate, translate_file

__version__ = VERSION
