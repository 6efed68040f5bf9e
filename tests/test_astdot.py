from arith.parser import parse
from arith.astdot import ASTVisualizer


def test_gendot():
    content = ASTVisualizer(parse("1 + 2 * 3")).gendot()
    assert content.startswith("digraph astgraph {\n")
    assert content.endswith("}\n")

    body = [line.strip() for line in content.splitlines() if line.startswith("  node")]
    assert body == [
        'node1 [label="+"]',
        'node2 [label="1"]',
        'node3 [label="*"]',
        'node4 [label="2"]',
        'node5 [label="3"]',
        "node3 -> node4",
        "node3 -> node5",
        "node1 -> node2",
        "node1 -> node3",
    ]


def test_gendot_single_literal():
    content = ASTVisualizer(parse("(42)")).gendot()
    assert '  node1 [label="42"]\n' in content
    assert "->" not in content


def test_gendot_twice():
    viz = ASTVisualizer(parse("8 / 4 - 1"))
    assert viz.gendot() == viz.gendot()
