"""The game: its states, screens and menus driven frame by frame."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from fireduck.asset_tracking import ResourceHandles
from fireduck.audio import AudioInstance, apply_global_volume, music
from fireduck.balistics import EXPLOSION_IMAGE
from fireduck.level import LevelAssets, LevelSpawn, spawn_level
from fireduck.menus import (
    VOLUME_LABEL_TAG,
    CreditsAssets,
    credits_menu,
    main_menu,
    pause_menu,
    settings_back_target,
    settings_menu,
    volume_label,
)
from fireduck.player import PlayerAssets
from fireduck.screens import (
    KEY_ESCAPE,
    KEY_P,
    SPLASH_BACKGROUND_COLOR,
    GameplayAction,
    ImageFadeInOut,
    SplashTimer,
    can_enter_gameplay,
    gameplay_key_action,
    loading_screen,
    pause_overlay,
    splash_screen,
)
from fireduck.states import Menu, Screen, State
from fireduck.theme import (
    BUTTON_BACKGROUND,
    Color,
    Interaction,
    InteractionAssets,
    Widget,
    interaction_sound,
)

WINDOW_TITLE = "Gamejam2"
WINDOW_SIZE = (1280, 720)
MAX_TRANSITION_ROUNDS = 16


class Game:
    """Screens, menus, pausing and asset loading, advanced by :meth:`update`.

    ``is_loaded`` decides whether an asset handle has finished loading;
    by default every asset is ready at once.
    """

    def __init__(
        self, *, web: bool = False, is_loaded: Optional[Callable[[Any], bool]] = None
    ) -> None:
        self.web = web
        self.screen: State[Screen] = State(Screen.default())
        self.menu: State[Menu] = State(Menu.default())
        self.pause: State[bool] = State(False)
        self.resource_handles = ResourceHandles()
        self.resources: Dict[str, Any] = {}
        self.global_volume = 1.0
        self._applied_volume: Optional[float] = None
        self.exit_requested = False
        self.ui: List[Widget] = []
        self._audio: List[Tuple[Any, AudioInstance]] = []
        self.level: Optional[LevelSpawn] = None
        self.ldtk_ready = True
        self.splash_timer: Optional[SplashTimer] = None
        self._splash: Optional[Tuple[Widget, ImageFadeInOut]] = None
        self._pressed: set = set()
        self._is_loaded = is_loaded or (lambda _handle: True)

        for key, handle in (
            ("level", LevelAssets()),
            ("player", PlayerAssets()),
            ("explosion", EXPLOSION_IMAGE),
            ("credits", CreditsAssets()),
            ("interaction", InteractionAssets()),
        ):
            self._load(key, handle)

        self._enter_screen(self.screen.current)
        self._enter_menu(self.menu.current)

    @property
    def paused(self) -> bool:
        return self.pause.current

    @property
    def audio(self) -> List[AudioInstance]:
        """Every sound currently playing."""
        return [instance for _, instance in self._audio]

    def _load(self, key: str, handle: Any) -> None:
        def insert(loaded: Any) -> None:
            self.resources[key] = loaded

        self.resource_handles.load_resource(handle, insert)

    # Input -------------------------------------------------------------

    def press_key(self, key: str) -> None:
        """Record a key press, handled by the next :meth:`update`."""
        self._pressed.add(key)

    def click(self, text: str) -> None:
        """Click the button labelled ``text``; raises KeyError if there is none."""
        for root in sorted(self.ui, key=lambda w: w.z_index or 0, reverse=True):
            try:
                widget = root.find(text)
            except KeyError:
                continue
            if widget.action is None:
                continue
            sound = interaction_sound(
                self.resources.get("interaction"), Interaction.PRESSED, True
            )
            if sound is not None:
                self._audio.append((None, sound))
            widget.action(self)
            return
        raise KeyError(text)

    # Frame -------------------------------------------------------------

    def update(self, delta: float) -> None:
        """Run one frame of ``delta`` seconds."""
        self.resource_handles.process(self._is_loaded)
        self._apply_transitions()

        pressed, self._pressed = self._pressed, set()
        screen, menu = self.screen.current, self.menu.current

        if screen is Screen.SPLASH:
            if self._splash is not None:
                self._splash[1].tick(delta)
            if self.splash_timer is not None:
                self.splash_timer.tick(delta)
            if self._splash is not None:
                image, fade = self._splash
                image.color = Color(1.0, 1.0, 1.0, fade.alpha())
            if self.splash_timer is not None and self.splash_timer.timer.just_finished():
                self.screen.set(Screen.TITLE)
            if KEY_ESCAPE in pressed:
                self.screen.set(Screen.TITLE)

        if can_enter_gameplay(screen, self.resource_handles.is_all_done(), self.ldtk_ready):
            self.screen.set(Screen.GAMEPLAY)

        actions = {gameplay_key_action(screen, menu, key) for key in pressed}
        if GameplayAction.PAUSE in actions:
            self.pause.set(True)
            self.ui.append(pause_overlay())
            self.menu.set(Menu.PAUSE)
        if GameplayAction.CLOSE_MENU in actions:
            self.menu.set(Menu.NONE)

        if KEY_ESCAPE in pressed:
            if menu is Menu.CREDITS:
                self.menu.set(Menu.MAIN)
            elif menu is Menu.PAUSE:
                self.menu.set(Menu.NONE)
            elif menu is Menu.SETTINGS:
                self.menu.set(settings_back_target(screen))

        if menu is Menu.SETTINGS:
            for widget in self._widgets():
                if widget.tag == VOLUME_LABEL_TAG:
                    widget.text = volume_label(self.global_volume)

        if self.global_volume != self._applied_volume:
            apply_global_volume(self.global_volume, self.audio)
            self._applied_volume = self.global_volume

    def _widgets(self) -> Iterator[Widget]:
        for root in self.ui:
            yield from root

    # Transitions -------------------------------------------------------

    def _apply_transitions(self) -> None:
        handlers = (
            (self.screen, self._exit_screen, self._enter_screen),
            (self.menu, self._exit_menu, self._enter_menu),
            (self.pause, _ignore, _ignore),
        )
        for _ in range(MAX_TRANSITION_ROUNDS):
            changed = False
            for state, on_exit, on_enter in handlers:
                transition = state.apply()
                if transition is None:
                    continue
                changed = True
                old, new = transition
                self._despawn_scope(old)
                on_exit(old)
                on_enter(new)
            if not changed:
                return
        raise RuntimeError("state transitions did not settle")

    def _despawn_scope(self, value: Any) -> None:
        self.ui = [w for w in self.ui if w.scope is None or w.scope != value]
        self._audio = [
            (scope, inst) for scope, inst in self._audio if scope is None or scope != value
        ]
        if self.level is not None and self.level.screen == value:
            self.level = None

    def _enter_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            root, fade = splash_screen()
            self.ui.append(root)
            self._splash = (root.children[0], fade)
            self.splash_timer = SplashTimer()
        elif screen is Screen.TITLE:
            self.menu.set(Menu.MAIN)
        elif screen is Screen.LOADING:
            self.ui.append(loading_screen())
        elif screen is Screen.GAMEPLAY:
            level_assets = self.resources.get("level")
            if level_assets is not None:
                self.level = spawn_level(level_assets)

    def _exit_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash_timer = None
            self._splash = None
        elif screen is Screen.TITLE:
            self.menu.set(Menu.NONE)
        elif screen is Screen.GAMEPLAY:
            self.menu.set(Menu.NONE)
            self.pause.set(False)

    def _enter_menu(self, menu: Menu) -> None:
        if menu is Menu.MAIN:
            self.ui.append(main_menu(self.web))
        elif menu is Menu.CREDITS:
            self.ui.append(credits_menu())
            credits = self.resources.get("credits")
            if credits is not None:
                self._audio.append((Menu.CREDITS, music(credits.music)))
        elif menu is Menu.SETTINGS:
            self.ui.append(settings_menu())
        elif menu is Menu.PAUSE:
            self.ui.append(pause_menu())
        elif menu is Menu.NONE and self.screen.current is Screen.GAMEPLAY:
            self.pause.set(False)

    def _exit_menu(self, menu: Menu) -> None:
        """Menus leave nothing behind but their scoped widgets."""


def _ignore(_value: Any) -> None:
    return None


# Window ----------------------------------------------------------------


def _rgb(color: Color) -> Tuple[int, int, int]:
    return tuple(round(max(0.0, min(1.0, c)) * 255) for c in (color.r, color.g, color.b))


def _draw_items(widget: Widget) -> Iterator[Tuple[str, float, Optional[Widget]]]:
    """(text, font size, button) for each visible text, in layout order."""
    if widget.action is not None:
        text_widget = next((c for c in widget.children_tree() if c.text), None)
        if text_widget is not None:
            yield text_widget.text, text_widget.font_size or 24.0, widget
        return
    if widget.text:
        yield widget.text, widget.font_size or 24.0, None
    for child in widget.children:
        yield from _draw_items(child)


def _run_window(game: Game, fps: int) -> int:
    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts: Dict[int, Any] = {}
        keys = {pygame.K_ESCAPE: KEY_ESCAPE, pygame.K_p: KEY_P}

        while not game.exit_requested:
            background = (
                SPLASH_BACKGROUND_COLOR
                if game.screen.current is Screen.SPLASH
                else Color(0.0, 0.0, 0.0)
            )
            surface.fill(_rgb(background))
            mouse = pygame.mouse.get_pos()
            targets = []
            for root in sorted(game.ui, key=lambda w: w.z_index or 0):
                if root.background is not None and root.background.a < 1.0:
                    shade = pygame.Surface(WINDOW_SIZE, pygame.SRCALPHA)
                    shade.fill((*_rgb(root.background), round(root.background.a * 255)))
                    surface.blit(shade, (0, 0))
                items = list(_draw_items(root))
                heights = [size * 1.6 for _, size, _ in items]
                y = (WINDOW_SIZE[1] - sum(heights)) / 2
                for (text, size, owner), height in zip(items, heights):
                    font = fonts.setdefault(int(size), pygame.font.Font(None, int(size)))
                    rendered = font.render(text, True, (255, 255, 255))
                    rect = rendered.get_rect(center=(WINDOW_SIZE[0] // 2, int(y + height / 2)))
                    if owner is not None:
                        box = rect.inflate(40, 16)
                        fill = owner.background or BUTTON_BACKGROUND
                        if owner.palette is not None and box.collidepoint(mouse):
                            fill = owner.palette.color_for(Interaction.HOVERED)
                        pygame.draw.rect(surface, _rgb(fill), box, border_radius=12)
                        targets.append((box, text))
                    surface.blit(rendered, rect)
                    y += height
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.exit_requested = True
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    game.press_key(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for box, text in reversed(targets):
                        if box.collidepoint(event.pos):
                            game.click(text)
                            break
            game.update(clock.tick(fps) / 1000.0)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game in a window, or simulate it with ``--headless``."""
    parser = argparse.ArgumentParser(prog="fireduck", description="Run the game.")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument(
        "--seconds", type=float, default=5.0, help="simulated time when headless"
    )
    parser.add_argument("--fps", type=int, default=60, help="frames per second")
    parser.add_argument("--web", action="store_true", help="behave as a web build")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    game = Game(web=args.web)
    if not args.headless:
        return _run_window(game, args.fps)

    delta = 1.0 / args.fps
    for _ in range(round(args.seconds * args.fps)):
        game.update(delta)
        if game.exit_requested:
            break
    print(f"screen={game.screen.current.value} menu={game.menu.current.value}")
    return 0