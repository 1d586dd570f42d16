from risk_map import RiskMap, safest_path
from visualize import plot_risk_path


def test_plot_risk_path_writes_png(tmp_path):
    risk_map = RiskMap([[1, 9, 1], [1, 1, 1], [9, 9, 1]])
    _, path = safest_path(risk_map)

    output_file = plot_risk_path(risk_map, path, tmp_path / "plots" / "path.png")

    assert output_file.exists()
    assert output_file.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_without_path(tmp_path):
    output_file = plot_risk_path(RiskMap([[1]]), [], tmp_path / "empty.png")

    assert output_file.exists()
