"""Window, sprites and input handling for the game."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game  # noqa: E402
from solong.mapfile import COLLECTIBLE, EXIT, WALL, MapError, load_map  # noqa: E402

TILE_SIZE = 64
TITLE = "so_long"
ASSET_NAMES = ("player", "wall", "floor", "collectible", "exit")

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

_TILE_SPRITES = {WALL: "wall", COLLECTIBLE: "collectible", EXIT: "exit"}


def key_to_direction(key: int) -> Direction | None:
    """Return the direction bound to ``key``, or None."""
    return _KEY_DIRECTIONS.get(key)


def tile_sprites(game: Game) -> list[tuple[str, tuple[int, int]]]:
    """Return the sprites to draw, in order, with their pixel positions."""
    sprites: list[tuple[str, tuple[int, int]]] = []
    for row in range(game.height):
        for col in range(game.width):
            position = (col * TILE_SIZE, row * TILE_SIZE)
            sprites.append(("floor", position))
            name = _TILE_SPRITES.get(game.tile(row, col))
            if name is not None:
                sprites.append((name, position))
    p_row, p_col = game.player
    sprites.append(("player", (p_col * TILE_SIZE, p_row * TILE_SIZE)))
    return sprites


def load_assets(directory: str | os.PathLike[str]) -> dict[str, pygame.Surface]:
    """Load every sprite image from ``directory``."""
    assets = {}
    for name in ASSET_NAMES:
        path = Path(directory) / f"{name}.xpm"
        try:
            assets[name] = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise OSError(f"cannot load asset {path}: {exc}") from exc
    return assets


def _draw(screen: pygame.Surface, assets: dict[str, pygame.Surface], game: Game) -> None:
    screen.fill((0, 0, 0))
    for name, position in tile_sprites(game):
        screen.blit(assets[name], position)
    pygame.display.flip()


def run(game: Game, asset_dir: str | os.PathLike[str] = "assets") -> bool:
    """Show ``game`` in a window until it is won or closed; return whether it was won."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.width * TILE_SIZE, game.height * TILE_SIZE)
        )
        pygame.display.set_caption(TITLE)
        assets = load_assets(asset_dir)
        while not game.won:
            _draw(screen, assets, game)
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    break
                direction = key_to_direction(event.key)
                if direction is not None:
                    game.move(direction)
        return game.won
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nusage: solong <map.ber>", file=sys.stderr)
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    try:
        run(Game(game_map))
    except (OSError, pygame.error) as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())