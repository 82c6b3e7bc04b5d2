"""Node types, builders and JSON codec for nodeplate trees."""

from nodeplate.nodes.base import Node, Script
from nodeplate.nodes.builders import flatten_children, tag, text
from nodeplate.nodes.codec import dump_node, load_node, node_from_dict, node_to_dict

__all__ = [
    "Node",
    "Script",
    "dump_node",
    "flatten_children",
    "load_node",
    "node_from_dict",
    "node_to_dict",
    "tag",
    "text",
]
