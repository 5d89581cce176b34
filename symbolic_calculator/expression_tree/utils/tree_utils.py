"""
Tree Utility Functions

Traversal and analysis helpers shared by the validator, the expression
wrapper and the command layer.
"""

from typing import List, Set

from ..core.node import Node, NumberNode, VariableNode, OperationNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first traversal (recursive, pre-order)"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if isinstance(node, (NumberNode, VariableNode)):
        return 1
    elif isinstance(node, OperationNode) and node.children:
        return 1 + max(calculate_tree_depth(child) for child in node.children)
    else:
        return 1


def get_variables(node: Node) -> Set[str]:
    """Names of all variables referenced anywhere in the tree"""
    return {n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)}


def get_operations(node: Node) -> List[OperationNode]:
    return [n for n in get_all_nodes(node) if isinstance(n, OperationNode)]


def is_fully_folded(node: Node) -> bool:
    """True when no operation is left in the tree"""
    return not get_operations(node)
