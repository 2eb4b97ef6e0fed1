import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

from mazecanvas.common.config_loader import load_config, LOG_LEVELS, MODES
from mazecanvas.common.maze_cache import clamp_dimension
from mazecanvas.common.pdf_export import export_summary_pdf
from mazecanvas.maze_gen.generator import MazeConfig, MazeGenerator, image_name

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='mazecanvas', description='Generate and draw rectangular mazes.')
    parser.add_argument('--config', default=None, help='directory holding config.yaml / local.yaml')
    parser.add_argument('--width', type=int, default=None)
    parser.add_argument('--height', type=int, default=None)
    parser.add_argument('--n', type=int, default=None)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--cell_px', type=int, default=None)
    parser.add_argument('--max_canvas_px', type=int, default=None)
    parser.add_argument('--mode', choices=list(MODES), default=None, help="'both' draws wall and path images of one maze")
    parser.add_argument('--hide_entrance_exit', action='store_true')
    parser.add_argument('--remove_dead_ends', action='store_true')
    parser.add_argument('--out_dir', default=None)
    parser.add_argument('--no_pdf', action='store_true')
    parser.add_argument('--log_level', type=str.upper, choices=list(LOG_LEVELS), default=None)
    return parser


def merge_args(cfg: Dict, args: argparse.Namespace) -> Dict:
    cfg = dict(cfg)
    for key in ('width', 'height', 'n', 'seed', 'cell_px', 'max_canvas_px', 'mode', 'log_level'):
        v = getattr(args, key)
        if v is not None:
            cfg[key] = v
    if args.out_dir is not None:
        cfg['output_dir'] = args.out_dir
    if args.hide_entrance_exit:
        cfg['entrance_exit'] = False
    if args.remove_dead_ends:
        cfg['remove_dead_ends'] = True
    return cfg


def border_modes(mode: str) -> List[bool]:
    if mode == 'both':
        return [True, False]
    return [mode == 'wall']


def run(cfg: Dict, write_pdf: bool = True) -> Dict:
    w = clamp_dimension(cfg['width'])
    h = clamp_dimension(cfg['height'])
    n = max(1, int(cfg.get('n') or 1))
    base_seed: Optional[int] = cfg.get('seed')
    mode = cfg.get('mode', 'wall')
    entrance_exit = bool(cfg.get('entrance_exit', True))
    out_dir = Path(cfg.get('output_dir') or 'outputs')
    out_dir.mkdir(parents=True, exist_ok=True)

    results: List[Dict] = []
    img_paths: List[str] = []
    for i in tqdm(range(n), desc='Mazes'):
        gen = MazeGenerator(MazeConfig(
            width=w, height=h,
            seed=None if base_seed is None else base_seed + i,
            remove_dead_ends=bool(cfg.get('remove_dead_ends')),
            cell_px=cfg.get('cell_px'),
            max_canvas_px=int(cfg.get('max_canvas_px') or 480),
            entrance_exit=entrance_exit,
        ))
        images: List[str] = []
        for border_mode in border_modes(mode):
            # every display mode draws the cached maze of this index
            grid = gen.generate()
            img_path = out_dir / image_name(w, h, border_mode, entrance_exit, index=i)
            gen.render_image(grid, border_mode=border_mode).save(img_path)
            images.append(str(img_path))
        info = gen.describe(grid)
        (out_dir / f"maze_{w}x{h}_{i}.json").write_text(json.dumps(info, ensure_ascii=False), encoding='utf-8')
        logger.info('maze %d: %dx%d attempts=%d dead_ends=%d -> %s', i, w, h, info['attempts'],
                    info['stats']['dead_ends'], ', '.join(images))
        results.append({k: v for k, v in info.items() if k != 'grid'} | {'images': images})
        img_paths.extend(images)

    summary = {
        'settings': {
            'size': f'{w}x{h}',
            'mode': mode,
            'entrance_exit': entrance_exit,
            'remove_dead_ends': bool(cfg.get('remove_dead_ends')),
            'seed': base_seed,
        },
        'items': results,
    }
    (out_dir / 'summary.json').write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')
    if write_pdf:
        export_summary_pdf(str(out_dir / 'summary.pdf'), 'Maze Summary', summary, image_paths=img_paths)
    return summary


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    cfg = merge_args(load_config(args.config), args)
    logging.basicConfig(level=cfg.get('log_level') or 'INFO',
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    run(cfg, write_pdf=not args.no_pdf)
    print('Done. See', cfg.get('output_dir'))


if __name__ == '__main__':
    main()
