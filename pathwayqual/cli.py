from __future__ import annotations

import logging
from pathlib import Path

import click
import libsbml
import networkx as nx

from . import constants
from .graph import GraphVariant
from .options import NamingMode, TranslatorOptions
from .pathway_io import read_annotations
from .sbml_model import SBMLModelVariant
from .sbml_qual import SBMLQualVariant
from .sbml_utils import sbml_string
from .translator import translate_file

VARIANTS = {
    "qual": (SBMLQualVariant, ".qual.sbml"),
    "sbml": (SBMLModelVariant, ".sbml"),
    "graphml": (GraphVariant, ".graphml"),
}


def _get_version_info() -> str:
    """Get version information for PathwayQual and libSBML"""
    try:
        libsbml_version = libsbml.getLibSBMLDottedVersion()
    except Exception:
        libsbml_version = "unknown"
    return f"Created by PathwayQual version {constants.VERSION} with libSBML version {libsbml_version}"


def _get_output_name(input_path: str, new_extension: str) -> str:
    """Generate output filename based on input, replacing its extension."""
    p = Path(input_path)
    if p.suffix.lower() == ".json":
        return str(p.with_suffix("")) + new_extension
    return str(p) + new_extension


def write_sbml(doc: libsbml.SBMLDocument, output_path: str) -> None:
    lines = sbml_string(doc).split("\n")
    version_comment = f"<!-- {_get_version_info()} -->"
    # keep the comment after the XML declaration
    if lines and lines[0].startswith("<?xml"):
        lines.insert(1, version_comment)
    else:
        lines.insert(0, '<?xml version="1.0" encoding="UTF-8"?>')
        lines.insert(1, version_comment)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


@click.group()
@click.version_option(constants.VERSION, prog_name="pathwayqual")
def main():
    pass


@click.command(name="translate")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False), required=False)
@click.option("--format", "output_format", type=click.Choice(sorted(VARIANTS)), default="qual", show_default=True, help="Output format")
@click.option("--annotations", "annotations_path", type=click.Path(exists=True, dir_okay=False), help="JSON file with cached annotation records")
@click.option("--offline", is_flag=True, default=False, help="Do not use annotation records")
@click.option("--remove-orphans", is_flag=True, default=False, help="Remove entries without relations or reactions")
@click.option("--keep-generic-nodes", is_flag=True, default=False, help="Keep nodes not specific to the organism (white nodes)")
@click.option("--no-autocomplete", is_flag=True, default=False, help="Do not add missing reaction participants")
@click.option("--check-atom-balance", is_flag=True, default=False, help="Note unbalanced reactions")
@click.option("--remove-pathway-references", is_flag=True, default=False, help="Remove references to other pathway maps")
@click.option("--formula", "prefer_formula", is_flag=True, default=False, help="Label compounds with their chemical formula")
@click.option("--naming", type=click.Choice([m.value for m in NamingMode]), default=NamingMode.INTELLIGENT.value, show_default=True, help="How to label entries")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable verbose logging")
def translate_entry(input_path: str, output_path: str | None, output_format: str, annotations_path: str | None,
                    offline: bool, remove_orphans: bool, keep_generic_nodes: bool, no_autocomplete: bool,
                    check_atom_balance: bool, remove_pathway_references: bool, prefer_formula: bool,
                    naming: str, verbose: bool):
    """Translate a pathway (JSON) to a qualitative model, an SBML model or a GraphML graph.

    INPUT_PATH: pathway JSON file

    OUTPUT_PATH: output file (optional, defaults to input name with a format specific extension)
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    variant_cls, extension = VARIANTS[output_format]
    if output_path is None:
        output_path = _get_output_name(input_path, extension)

    options = TranslatorOptions(
        retrieve_annotations=not offline,
        remove_orphans=remove_orphans,
        remove_generic_nodes=not keep_generic_nodes,
        autocomplete_reactions=not no_autocomplete,
        check_atom_balance=check_atom_balance,
        remove_pathway_references=remove_pathway_references,
        prefer_formula_for_compounds=prefer_formula,
        naming_mode=NamingMode.parse(naming),
    )
    try:
        lookup = read_annotations(annotations_path) if annotations_path else None
        result = translate_file(input_path, variant_cls(), lookup, options)
    except ValueError as e:
        raise click.ClickException(str(e))
    if result is None:
        raise click.ClickException(f"Translation of {input_path} failed, see log for details")

    if output_format == "graphml":
        nx.write_graphml(result, output_path)
    else:
        write_sbml(result, output_path)
    click.echo(f"Wrote {output_format} to {output_path}")


# Add the commands to the main group
main.add_command(translate_entry)


if __name__ == "__main__":
    main()
