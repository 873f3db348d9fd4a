BRANCH = '├──'
LAST_BRANCH = '└──'
INDENT = '│   '
LAST_INDENT = '    '


def node_text(node):
    if node.is_leaf():
        return f"({node.label}, {node.value})"
    return node.label


def tree_to_lines(node, prefix='', is_last=True):
    """Render `node` and its subtree, one line per node, in pre-order.

    Children are visited in slot order and only occupied slots are drawn,
    so a node whose middle slots are empty (a for header such as
    ``for(; i < n;)``) still closes with the right glyph.
    """
    connector = LAST_BRANCH if is_last else BRANCH
    lines = [prefix + connector + node_text(node)]
    children = node.children
    new_prefix = prefix + (LAST_INDENT if is_last else INDENT)
    for i, child in enumerate(children):
        lines.extend(tree_to_lines(child, new_prefix, i == len(children) - 1))
    return lines


def write_tree(root, out):
    for ln in tree_to_lines(root):
        out.write(ln + '\n')
