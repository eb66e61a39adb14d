import json
from pathlib import Path

import pytest

from layernet.core.errors import TopologyError
from layernet.core.layers import LayerKind
from layernet.training import pipelines


def test_static_demo_preset_runs(tmp_path):
    config = pipelines.load_preset("static-demo")
    config["train"]["run_dir"] = str(tmp_path / "run")

    result = pipelines.run_pipeline(config)

    assert result.steps == 2
    records = [
        json.loads(line)
        for line in Path(result.outputs_path).read_text().splitlines()
        if line
    ]
    assert [r["step"] for r in records] == [0, 1]
    for record in records:
        assert len(record["output"]) == 2
        assert all(0.0 < v < 1.0 for v in record["output"])
        assert "sha" in record and record["seed"] == 0

    manifest = json.loads(Path(result.manifest_path).read_text())
    assert manifest["network"]["layer_dims"] == [3, 3, 20, 2]
    assert manifest["source"]["type"] == "static"
    assert manifest["config"]["model"]["hidden"] == [20]


def test_pipeline_determinism(tmp_path):
    config = pipelines.load_preset("uniform-wide")
    config["train"]["run_dir"] = str(tmp_path / "a")
    first = Path(pipelines.run_pipeline(config).outputs_path).read_text()
    config["train"]["run_dir"] = str(tmp_path / "b")
    second = Path(pipelines.run_pipeline(config).outputs_path).read_text()
    assert first == second


def test_build_layers_from_shorthand():
    layers = pipelines.build_layers({"d_in": 3, "hidden": [20], "d_out": 2})
    assert [layer.kind for layer in layers] == [
        LayerKind.PASSTHROUGH,
        LayerKind.DENSE,
        LayerKind.DENSE_OUTPUT,
    ]
    assert [(l.input_dim, l.output_dim) for l in layers] == [(3, 3), (3, 20), (20, 2)]


def test_build_layers_without_hidden():
    layers = pipelines.build_layers({"d_in": 4, "d_out": 1})
    assert [(l.input_dim, l.output_dim) for l in layers] == [(4, 4), (4, 1)]


def test_build_layers_from_explicit_list():
    config = pipelines.load_preset("explicit-layers")
    layers = pipelines.build_layers(config["model"])
    assert [layer.kind for layer in layers] == [
        LayerKind.PASSTHROUGH,
        LayerKind.DENSE,
        LayerKind.DENSE,
    ]


def test_build_layers_rejects_incomplete_config():
    with pytest.raises(ValueError):
        pipelines.build_layers({"hidden": [3]})
    with pytest.raises(ValueError):
        pipelines.build_layers({"layers": [{"input_dim": 3}]})


def test_mismatched_layers_abort_pipeline(tmp_path):
    config = pipelines.load_preset("explicit-layers")
    config["model"]["layers"][1]["input_dim"] = 5
    config["train"]["run_dir"] = str(tmp_path / "run")
    with pytest.raises(TopologyError):
        pipelines.run_pipeline(config)
    assert not (tmp_path / "run" / "manifest.json").exists()


def test_record_outputs_can_be_disabled(tmp_path):
    config = pipelines.load_preset("static-demo")
    config["train"].update({"run_dir": str(tmp_path / "run"), "record_outputs": False})
    result = pipelines.run_pipeline(config)
    assert result.outputs_path == ""
    assert Path(result.manifest_path).exists()


def test_unknown_preset():
    with pytest.raises(KeyError, match="Unknown preset"):
        pipelines.load_preset("missing")
