import pytest

from cave_paths import CaveSystem, count_paths, list_paths

SMALL_EXAMPLE = """\
start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""

LARGER_EXAMPLE = """\
dc-end
HN-start
start-kj
dc-start
dc-HN
LN-dc
HN-end
kj-sc
kj-HN
kj-dc
"""


@pytest.mark.parametrize("text,single_visit,one_revisit", [
    (SMALL_EXAMPLE, 10, 36),
    (LARGER_EXAMPLE, 19, 103),
])
def test_count_paths(text, single_visit, one_revisit):
    caves = CaveSystem.parse(text)

    assert count_paths(caves) == single_visit
    assert count_paths(caves, allow_revisit=True) == one_revisit


def test_list_paths_matches_count():
    caves = CaveSystem.parse(SMALL_EXAMPLE)
    paths = list_paths(caves)

    assert len(paths) == 10
    assert ["start", "A", "b", "A", "c", "A", "end"] in paths
    assert all(path[0] == "start" and path[-1] == "end" for path in paths)
    assert len(list_paths(caves, allow_revisit=True)) == 36


def test_revisit_never_returns_to_start():
    caves = CaveSystem.parse(SMALL_EXAMPLE)

    for path in list_paths(caves, allow_revisit=True):
        assert path.count("start") == 1
        small = [cave for cave in path if cave.islower()]
        assert len(small) - len(set(small)) <= 1


def test_missing_start_has_no_paths():
    assert count_paths(CaveSystem.parse("a-end\n")) == 0


def test_no_route_to_end():
    assert count_paths(CaveSystem.parse("start-a\nb-end\n")) == 0


@pytest.mark.parametrize("text", ["start-a-b\n", "start\n", "start-Ab\n", "start-A\nA-B\nB-end\n"])
def test_parse_rejects_malformed_lines(text):
    with pytest.raises(ValueError):
        CaveSystem.parse(text)
