import pytest

from splinedit.config import EditorSettings, load_settings, save_settings


def test_defaults():
    s = EditorSettings()
    assert (s.window_width, s.window_height) == (1024, 768)
    assert s.pick_radius == 0.05
    assert s.degree == 3
    assert s.curve_samples == 100
    assert (s.weight_min, s.weight_max, s.default_weight) == (0.01, 10.0, 1.0)


def test_load_overrides(tmp_path):
    path = tmp_path / "editor.yaml"
    path.write_text("degree: 2\ncurve_samples: 40\npick_radius: 0.1\n")
    s = load_settings(path)
    assert s.degree == 2
    assert s.curve_samples == 40
    assert s.pick_radius == 0.1
    assert s.u_samples == 30


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "editor.yaml"
    path.write_text("")
    assert load_settings(path) == EditorSettings()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "editor.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_settings(path)


@pytest.mark.parametrize("data", [
    {"colour": "red"},
    {"degree": "cubic"},
    {"degree": 0},
    {"weight_min": 2.0, "weight_max": 1.0},
    {"default_weight": 20.0},
    {"curve_samples": 0},
])
def test_invalid_settings(data):
    with pytest.raises(ValueError):
        EditorSettings.from_mapping(data)


def test_save_and_load(tmp_path):
    original = EditorSettings(degree=4, u_samples=12, weight_max=5.0)
    path = tmp_path / "cfg" / "editor.yaml"
    save_settings(original, path)
    assert load_settings(path) == original
