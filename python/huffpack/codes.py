from huffpack.abc import CodeTableType
from huffpack.tree import Internal, Leaf, Node


def generate_codes(root: Node | None) -> CodeTableType:
    codes: CodeTableType = {}
    if root is None:
        return codes

    # A lone leaf would get an empty code; give it one bit instead.
    if isinstance(root, Leaf):
        codes[root.symbol] = "0"
        return codes

    # Iterative DFS, tree depth can reach 255
    stack: list[tuple[Node, str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if isinstance(node, Internal):
            stack.append((node.right, code + "1"))
            stack.append((node.left, code + "0"))
        else:
            codes[node.symbol] = code
    return codes


def is_prefix_free(codes: CodeTableType) -> bool:
    # After sorting, a prefix always sorts directly before some code it prefixes
    ordered = sorted(codes.values())
    for a, b in zip(ordered, ordered[1:]):
        if b.startswith(a):
            return False
    return True
