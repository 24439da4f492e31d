from __future__ import annotations

import logging

import networkx as nx

from .context import TranslationContext
from .transitions import resolve_sign
from .translator import TranslatorVariant
from .types import Pathway

logger = logging.getLogger(__name__)


class GraphVariant(TranslatorVariant):
    """Generic visual graph: one node per entry, one edge per relation and per substrate-product pair.

    Parallel edges are kept, so a relation and a reaction between the same
    entries stay apart.
    """

    name = "graph"

    def considers_relations(self) -> bool:
        return True

    def considers_reactions(self) -> bool:
        return True

    def translate_core(self, pathway: Pathway, context: TranslationContext) -> nx.MultiDiGraph:
        graph = nx.MultiDiGraph(name=pathway.name, title=pathway.title or "")
        for entry in pathway.entries:
            node_id = context.ids.allocate(f"n{entry.entry_id}")
            attrs = {"label": context.name_for(entry), "type": entry.type, "kegg": entry.name}
            if entry.graphics is not None:
                g = entry.graphics
                for key in ("x", "y", "width", "height"):
                    if getattr(g, key) is not None:
                        attrs[key] = float(getattr(g, key))
                if g.bgcolor:
                    attrs["color"] = g.bgcolor
            graph.add_node(node_id, **attrs)
            context.set_element(entry, node_id)

        for entry in pathway.entries:
            if entry.parent_group is None:
                continue
            group = context.element_for(entry.parent_group)
            if group is not None:
                graph.nodes[context.element_for(entry.entry_id)]["group"] = group

        for relation in pathway.relations:
            source = context.element_for(relation.entry1)
            target = context.element_for(relation.entry2)
            if source is None or target is None:
                logger.debug("Relation with unknown or removed entry: %s -> %s", relation.entry1, relation.entry2)
                continue
            subtypes = relation.subtype_names()
            sign, _ = resolve_sign(subtypes)
            graph.add_edge(source, target, kind="relation", subtypes=", ".join(subtypes), sign=sign)

        for reaction in pathway.reactions:
            for substrate in reaction.substrates:
                s_entry = pathway.entry_for_component(substrate)
                source = context.element_for(s_entry.entry_id) if s_entry is not None else None
                if source is None:
                    continue
                for product in reaction.products:
                    p_entry = pathway.entry_for_component(product)
                    target = context.element_for(p_entry.entry_id) if p_entry is not None else None
                    if target is None:
                        continue
                    graph.add_edge(source, target, kind="reaction", reaction=reaction.name,
                                   reversible=reaction.is_reversible())

        logger.info("Translated %s: %d nodes, %d edges", pathway.name, graph.number_of_nodes(), graph.number_of_edges())
        return graph
