"""Pipeline assembly: build a network and a source from a config and run it."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

from ..core.init import WeightInitializer
from ..core.layers import Layer, dense, dense_output, make_layer, passthrough
from ..core.network import Network
from ..core.types import TrainResult
from ..data import registry
from ..reporting.artifacts import write_manifest
from ..reporting.sinks import JsonlSink
from .trainer import Trainer

logger = logging.getLogger(__name__)

_PRESETS: Dict[str, Mapping[str, object]] = {
    "static-demo": {
        "data": {
            "name": "static",
            "options": {
                "samples": [
                    {"input": [0.5, 0.5, 0.5], "target": [0.4, 0.4]},
                    {"input": [0.5, 0.5, 0.5], "target": [0.4, 0.4]},
                ]
            },
        },
        "model": {"d_in": 3, "hidden": [20], "d_out": 2},
        "train": {"seed": 0, "run_dir": "runs/static-demo"},
    },
    "uniform-wide": {
        "data": {
            "name": "uniform",
            "options": {"n_samples": 64, "d_in": 8, "d_out": 4, "seed": 0},
        },
        "model": {"d_in": 8, "hidden": [32, 16], "d_out": 4},
        "train": {"seed": 0, "run_dir": "runs/uniform-wide"},
    },
    "explicit-layers": {
        "data": {
            "name": "uniform",
            "options": {"n_samples": 8, "d_in": 3, "d_out": 2, "seed": 1},
        },
        "model": {
            "layers": [
                {"kind": "passthrough", "input_dim": 3},
                {"kind": "dense", "input_dim": 3, "output_dim": 20},
                {"kind": "dense", "input_dim": 20, "output_dim": 2},
            ]
        },
        "train": {"seed": 0, "run_dir": "runs/explicit-layers"},
    },
}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Mapping[str, object]:
    try:
        return deepcopy(_PRESETS[name])
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available presets: {available}") from exc


def build_layers(model_cfg: Mapping[str, object]) -> List[Layer]:
    """Expand a model config into its layer list.

    Either an explicit ``layers`` list of ``{"kind", "input_dim",
    "output_dim"}`` entries, or the ``d_in``/``hidden``/``d_out`` shorthand
    which expands to a passthrough input stage, one dense layer per hidden
    width and a dense output stage.
    """

    if "layers" in model_cfg:
        layers = []
        for idx, entry in enumerate(model_cfg["layers"]):  # type: ignore[union-attr]
            if not isinstance(entry, Mapping) or "kind" not in entry or "input_dim" not in entry:
                raise ValueError(f"Layer entry {idx} must define 'kind' and 'input_dim'")
            output_dim = entry.get("output_dim")
            layers.append(
                make_layer(
                    str(entry["kind"]),
                    int(entry["input_dim"]),
                    int(output_dim) if output_dim is not None else None,
                )
            )
        return layers

    if "d_in" not in model_cfg or "d_out" not in model_cfg:
        raise ValueError("Model config needs either 'layers' or both 'd_in' and 'd_out'")
    dims = _build_dims(model_cfg)
    layers = [passthrough(dims[0])]
    for in_dim, out_dim in zip(dims[:-2], dims[1:-1]):
        layers.append(dense(in_dim, out_dim))
    layers.append(dense_output(dims[-2], dims[-1]))
    return layers


def build_network(model_cfg: Mapping[str, object]) -> Network:
    return Network(build_layers(model_cfg))


def run_pipeline(config: Mapping[str, object]) -> TrainResult:
    data_cfg = dict(config["data"])  # type: ignore[arg-type]
    model_cfg = dict(config["model"])  # type: ignore[arg-type]
    train_cfg = dict(config.get("train", {}))  # type: ignore[arg-type]

    source_spec = registry.get_source(str(data_cfg["name"]), **dict(data_cfg.get("options", {})))
    network = build_network(model_cfg)
    seed = int(train_cfg.get("seed", 0))

    run_dir = Path(str(train_cfg.get("run_dir", "runs/default")))
    run_dir.mkdir(parents=True, exist_ok=True)

    callbacks: List[object] = []
    sink: JsonlSink | None = None
    if train_cfg.get("record_outputs", True):
        sink = JsonlSink(run_dir / "outputs.jsonl", seed=seed)
        callbacks.append(sink)

    trainer = Trainer(
        network,
        source_spec.source,
        initializer=WeightInitializer(seed=seed),
        callbacks=callbacks,
    )
    if source_spec.input_dim != network.input_dim:
        logger.warning(
            "Source %r yields inputs of length %d but the network expects %d",
            source_spec.name,
            source_spec.input_dim,
            network.input_dim,
        )
    logger.info(
        "Running %r on source %r (%d parameters)",
        network,
        source_spec.name,
        network.parameter_count(),
    )

    result = trainer.train()

    description = network.describe()
    manifest = write_manifest(
        run_dir / "manifest.json",
        config=json.loads(json.dumps(config)),
        source_provenance=source_spec.provenance,
        network={
            "layer_dims": description.layer_dims,
            "layer_kinds": description.layer_kinds,
            "parameters": network.parameter_count(),
        },
    )
    return TrainResult(
        steps=result.steps,
        outputs_path=str(sink.path) if sink is not None else "",
        manifest_path=manifest,
    )


def _build_dims(model_cfg: Mapping[str, object]) -> List[int]:
    dims = [int(model_cfg["d_in"])]  # type: ignore[arg-type]
    hidden: Sequence[int] = model_cfg.get("hidden", [])  # type: ignore[assignment]
    dims.extend(int(h) for h in hidden)
    dims.append(int(model_cfg["d_out"]))  # type: ignore[arg-type]
    return dims


__all__ = [
    "build_layers",
    "build_network",
    "load_preset",
    "presets",
    "run_pipeline",
]
