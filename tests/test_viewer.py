from slidepath.app import viewer
from slidepath.core import algos
from slidepath.core.astar import SlideAStar


def test_viewer_uses_core_factory() -> None:
    assert viewer.make_algo is algos.make_algo


def test_algo_labels_cover_algos() -> None:
    assert set(viewer.ALGO_LABELS) == set(algos.ALGOS)
    assert viewer.ALGO_LABELS["astar"] == "A*"
    assert viewer.ALGO_LABELS["dijkstra"] == "Dijkstra"


def test_label_keys_build_engines() -> None:
    for key in viewer.ALGO_LABELS:
        engine = viewer.make_algo(key, "manhattan")
        assert engine.name.startswith(viewer.ALGO_LABELS[key])
    assert isinstance(viewer.make_algo("astar"), SlideAStar)
