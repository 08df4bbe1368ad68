# colorwalk/config.py
from __future__ import annotations
import json, logging, os
from typing import Dict, Any

from pathlib import Path

from .constants import DEFAULT_PALETTE, FINAL_ROUND, FPS, QUADRANTS, SWAP_EVERY, WINDOWED_DEFAULT_SIZE

logger = logging.getLogger(__name__)

PKG_DIR = Path(__file__).resolve().parent
CONFIG_PATH = os.environ.get("COLORWALK_CONFIG") or str(PKG_DIR / "config.json")

DEFAULT_CFG: Dict[str, Any] = {
    "display": {"fullscreen": False, "fps": FPS, "windowed_size": list(WINDOWED_DEFAULT_SIZE)},
    "game": {"final_round": FINAL_ROUND, "swap_every": SWAP_EVERY},
    "palette": [list(c) for c in DEFAULT_PALETTE],
    "pins": {"UP": 17, "RIGHT": 27, "DOWN": 22, "LEFT": 23},
    "controls": {"keys": {"UP": ["up", "w"], "RIGHT": ["right", "d"], "DOWN": ["down", "s"], "LEFT": ["left", "a"]}},
    "logging": {"level": "INFO"},
    "debug": {"overlay": False},
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _deepcopy(obj):
    return json.loads(json.dumps(obj))

def _merge(dst: dict, src: dict) -> dict:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _merge(dst[k], v)
        else:
            dst[k] = v
    return dst

def _clamp_int(value: Any, lo: int, hi: int, default: int) -> int:
    try:
        return int(max(lo, min(hi, int(value))))
    except (TypeError, ValueError):
        return default

def _sanitize_palette(raw: Any) -> list[list[int]]:
    out: list[list[int]] = []
    for entry in raw if isinstance(raw, list) else []:
        if not (isinstance(entry, (list, tuple)) and len(entry) == 3):
            continue
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in entry):
            continue
        rgb = [max(0, min(255, x)) for x in entry]
        if rgb not in out:
            out.append(rgb)
    # rerolls need at least one colour that none of the quadrants show
    if len(out) <= QUADRANTS:
        logger.warning(f"Palette has {len(out)} usable colours, falling back to the default palette")
        return [list(c) for c in DEFAULT_PALETTE]
    return out

def _sanitize_cfg(cfg: dict) -> dict:
    for section in ("display", "game", "pins", "controls", "logging", "debug"):
        if not isinstance(cfg.get(section), dict):
            logger.warning(f"Config section {section!r} is not an object, using defaults")
            cfg[section] = _deepcopy(DEFAULT_CFG[section])

    d = cfg.setdefault("display", {})
    d["fullscreen"] = bool(d.get("fullscreen", False))
    d["fps"] = _clamp_int(d.get("fps", FPS), 30, 240, FPS)
    ws = d.get("windowed_size", list(WINDOWED_DEFAULT_SIZE))
    if isinstance(ws, (list, tuple)) and len(ws) == 2 and all(isinstance(x, (int, float)) for x in ws):
        d["windowed_size"] = [max(100, min(10000, int(ws[0]))), max(100, min(10000, int(ws[1])))]
    else:
        d["windowed_size"] = list(WINDOWED_DEFAULT_SIZE)

    g = cfg.setdefault("game", {})
    g["final_round"] = _clamp_int(g.get("final_round", FINAL_ROUND), 1, 99, FINAL_ROUND)
    g["swap_every"] = _clamp_int(g.get("swap_every", SWAP_EVERY), 1, 99, SWAP_EVERY)

    cfg["palette"] = _sanitize_palette(cfg.get("palette"))

    pins = cfg.get("pins") if isinstance(cfg.get("pins"), dict) else {}
    cfg["pins"] = {
        name: _clamp_int(pins.get(name, default), 0, 40, default)
        for name, default in DEFAULT_CFG["pins"].items()
    }

    c = cfg.setdefault("controls", {})
    keys = c.get("keys") if isinstance(c.get("keys"), dict) else {}
    c["keys"] = {
        name: [str(k).lower() for k in keys[name]] if isinstance(keys.get(name), list) else list(default)
        for name, default in DEFAULT_CFG["controls"]["keys"].items()
    }

    lg = cfg.setdefault("logging", {})
    level = str(lg.get("level", "INFO")).upper()
    lg["level"] = level if level in LOG_LEVELS else "INFO"

    cfg.setdefault("debug", {})["overlay"] = bool(cfg["debug"].get("overlay", False))
    cfg["config_path"] = str(Path(CONFIG_PATH).resolve())
    return cfg

def save_config(partial_cfg: dict) -> None:
    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as f:
            base = json.load(f)
        if not isinstance(base, dict): base = {}
    except (OSError, ValueError):
        base = {}
    merged = _merge(base, partial_cfg)
    merged.pop("config_path", None)
    try:
        with open(CONFIG_PATH, "w", encoding="utf-8") as f:
            json.dump(merged, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.warning(f"Could not write config {CONFIG_PATH}: {e}")

def load_config() -> dict:
    cfg = _deepcopy(DEFAULT_CFG)
    try:
        with open(CONFIG_PATH, "r", encoding="utf-8") as f:
            user = json.load(f)
        if isinstance(user, dict):
            _merge(cfg, user)
    except FileNotFoundError:
        save_config(cfg)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {CONFIG_PATH}: {e}")
    return _sanitize_cfg(cfg)

def persist_windowed_size(width: int, height: int) -> None:
    save_config({"display": {"windowed_size": [int(width), int(height)]}})

def palette_from_cfg(cfg: dict | None = None) -> tuple[tuple[int, int, int], ...]:
    cfg = cfg or CFG
    return tuple(tuple(c) for c in cfg["palette"])

CFG = load_config()
