"""Drawing the level with pygame, and the window loop that drives a game."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import pygame

from solong.enemies import COIN_FRAME_COUNT, DOOR_FRAME_COUNT
from solong.game import TILE_SIZE, Direction, Game, GameEnded, Key
from solong.validate import COIN, EXIT, WALL

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLACK = (0, 0, 0)

HUD_FONT_SIZE = 20
FRAMES_PER_SECOND = 60

_PLAYER_FILES = {
    Direction.RIGHT: "char_right.xpm",
    Direction.LEFT: "char_left.xpm",
    Direction.UP: "char_up.xpm",
    Direction.DOWN: "char_down.xpm",
}

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class AssetError(Exception):
    """Raised when a texture cannot be loaded."""


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


@dataclass
class Assets:
    """The textures a level is drawn with."""

    player: dict[Direction, pygame.Surface]
    floor: pygame.Surface
    wall: pygame.Surface
    coins: list[pygame.Surface]
    exit_frames: list[pygame.Surface]
    enemy: pygame.Surface | None = None
    ball: pygame.Surface | None = None
    extra: dict[str, pygame.Surface] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | PathLike[str], bonus: bool = False) -> Assets:
        """Load every texture from ``directory``; raise AssetError on the first failure."""
        base = Path(directory)

        player = {d: _load_image(base / name) for d, name in _PLAYER_FILES.items()}
        enemy = _load_image(base / "enemy.xpm") if bonus else None
        if any(img is None for img in player.values()) or (bonus and enemy is None):
            raise AssetError("Could not load player textures")

        tile = _load_image(base / "tile.xpm")
        wall = _load_image(base / "wall.xpm")
        if bonus:
            coins = [
                _load_image(base / "an_coin" / f"coin{i}.xpm")
                for i in range(COIN_FRAME_COUNT)
            ]
            if any(img is None for img in coins):
                raise AssetError("Could not load coin textures")
            ball = _load_image(base / "ball.xpm")
            doors = [
                _load_image(base / "an_door" / f"{i}.xpm")
                for i in range(DOOR_FRAME_COUNT)
            ]
            if any(img is None for img in doors):
                raise AssetError("Could not load door textures")
            if tile is None or wall is None or ball is None:
                raise AssetError("Could not load map textures")
            return cls(
                player=player,
                floor=tile,
                wall=wall,
                coins=coins,
                exit_frames=doors,
                enemy=enemy,
                ball=ball,
            )

        coin = _load_image(base / "coin.xpm")
        exit_img = _load_image(base / "exit.xpm")
        if wall is None or coin is None or exit_img is None or tile is None:
            raise AssetError("Could not load map textures")
        # The plain game lays wall.xpm under every tile and tile.xpm over walls.
        return cls(
            player=player,
            floor=wall,
            wall=tile,
            coins=[coin],
            exit_frames=[exit_img],
        )


class Renderer:
    """Draws a game's current state onto a surface."""

    def __init__(self, game: Game, assets: Assets) -> None:
        self.game = game
        self.assets = assets
        self._font: pygame.font.Font | None = None

    @property
    def size(self) -> tuple[int, int]:
        """The window size in pixels."""
        return self.game.width * TILE_SIZE, self.game.height * TILE_SIZE

    def _font_for_hud(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, HUD_FONT_SIZE)
        return self._font

    def _draw_map(self, surface: pygame.Surface) -> None:
        game, assets = self.game, self.assets
        coin = assets.coins[game.coin_frames.frame % len(assets.coins)]
        door = assets.exit_frames[game.door_frames.frame % len(assets.exit_frames)]
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                pos = (x * TILE_SIZE, y * TILE_SIZE)
                surface.blit(assets.floor, pos)
                if tile == WALL:
                    surface.blit(assets.wall, pos)
                elif tile == COIN:
                    surface.blit(coin, pos)
                elif tile == EXIT and game.door_open:
                    surface.blit(door, pos)

    def _draw_enemies(self, surface: pygame.Surface) -> None:
        assets = self.assets
        enemies = self.game.enemies
        if assets.ball is not None:
            for enemy in enemies:
                surface.blit(
                    assets.ball, (enemy.ball_x * TILE_SIZE, enemy.ball_y * TILE_SIZE)
                )
        if assets.enemy is not None:
            for enemy in enemies:
                surface.blit(assets.enemy, (enemy.x * TILE_SIZE, enemy.y * TILE_SIZE))

    def _text(self, surface: pygame.Surface, text: str, x: int, color) -> None:
        surface.blit(self._font_for_hud().render(text, True, color), (x, 3))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        game = self.game
        self._text(surface, "Moves: ", 10, WHITE)
        self._text(surface, str(game.player.moves), 70, WHITE)
        color = GREEN if game.coins_collected == game.total_coins else RED
        surface.blit(self.assets.coins[0], (120, 0))
        self._text(surface, ": ", 150, WHITE)
        self._text(surface, str(game.coins_collected), 170, color)
        self._text(surface, " / ", 180, WHITE)
        self._text(surface, str(game.total_coins), 210, WHITE)

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw the map, the player and, in bonus mode, enemies and HUD."""
        surface.fill(BLACK)
        self._draw_map(surface)
        player = self.game.player
        surface.blit(self.assets.player[player.direction], (player.x, player.y))
        if self.game.bonus:
            self._draw_enemies(surface)
            self._draw_hud(surface)


def key_for(pygame_key: int) -> Key | None:
    """Return the game key bound to a pygame key code, or None."""
    return _KEYS.get(pygame_key)


def run(game: Game, assets_dir: str | PathLike[str]) -> GameEnded:
    """Open a window and play ``game`` until it ends; return how it ended.

    Raises AssetError if the textures cannot be loaded.
    """
    pygame.init()
    try:
        width, height = game.width * TILE_SIZE, game.height * TILE_SIZE
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("so_long_bonus" if game.bonus else "so_long")
        renderer = Renderer(game, Assets.load(assets_dir, game.bonus))
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        game.close()
                    elif event.type == pygame.KEYDOWN:
                        key = key_for(event.key)
                        if key is not None:
                            game.press(key)
                    elif event.type == pygame.KEYUP:
                        key = key_for(event.key)
                        if key is not None:
                            game.release(key)
                renderer.draw(screen)
                pygame.display.flip()
                game.tick()
                clock.tick(FRAMES_PER_SECOND)
        except GameEnded as ended:
            return ended
    finally:
        pygame.quit()