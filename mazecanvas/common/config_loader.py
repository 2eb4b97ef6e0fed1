from pathlib import Path
from typing import Dict, Optional
import os
import yaml

DEFAULTS: Dict = {
    'width': 10,
    'height': 10,
    'n': 1,
    'seed': None,
    'cell_px': None,
    'max_canvas_px': 480,
    'mode': 'wall',
    'entrance_exit': True,
    'remove_dead_ends': False,
    'output_dir': 'outputs',
    'log_level': 'INFO',
}

MODES = ('wall', 'path', 'both')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# environment variable -> (config key, parser)
ENV_KEYS = {
    'MAZE_WIDTH': ('width', int),
    'MAZE_HEIGHT': ('height', int),
    'MAZE_SEED': ('seed', int),
    'MAZE_OUTPUT_DIR': ('output_dir', str),
    'MAZE_MODE': ('mode', str),
    'MAZE_LOG_LEVEL': ('log_level', str),
}


def load_config(config_dir: Optional[str] = None) -> Dict:
    base_dir = Path(config_dir or 'config')
    base = base_dir / 'config.yaml'
    local = base_dir / 'local.yaml'
    cfg: Dict = dict(DEFAULTS)
    if base.exists():
        cfg.update(yaml.safe_load(base.read_text(encoding='utf-8')) or {})
    if local.exists():
        loc = yaml.safe_load(local.read_text(encoding='utf-8')) or {}
        cfg.update(loc)
    # Pull overrides from environment
    for env, (key, conv) in ENV_KEYS.items():
        raw = os.getenv(env)
        if raw is None:
            continue
        try:
            cfg[key] = conv(raw)
        except ValueError:
            raise ValueError(f'{env}={raw!r} is not a valid {conv.__name__}')
    if cfg.get('mode') not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {cfg.get('mode')!r}")
    level = str(cfg.get('log_level') or 'INFO').upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {cfg.get('log_level')!r}")
    cfg['log_level'] = level
    return cfg
