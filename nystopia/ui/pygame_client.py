"""Pygame 2D visualization for the Nystopia simulation.

Renders the food grid and the bots' labels in a window.  The simulation
steps at a configurable tick rate while the display refreshes at the
Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pygame

if TYPE_CHECKING:
    from nystopia.simulation.engine import SimulationEngine

from nystopia.bots.bot import BotState

# Colour palette
_BG = (0, 0, 0)
_FOOD = (0, 100, 0)
_PANEL_TEXT = (200, 200, 200)

# Bot label colours by state
_BOT_COLOURS: dict[BotState, tuple[int, int, int]] = {
    BotState.WANDERING: (190, 190, 190),
    BotState.FORAGING: (255, 220, 0),
    BotState.DEAD: (220, 40, 40),
}


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets in ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [
        0.5,
        1.0,
        2.0,
        4.0,
        8.0,
        15.0,
        30.0,
        60.0,
        120.0,
    ]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 14,
        ticks_per_second: float = 4.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            ticks_per_second: Simulation ticks per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0

        w = engine.grid.width * cell_size
        h = engine.grid.height * cell_size
        self._panel_width = 200
        self._win_w = w + self._panel_width
        self._win_h = max(h, 260)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Nystopia")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.label_font = pygame.font.SysFont("monospace", cell_size, bold=True)
        self.running = True
        self.paused = False

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        return min(
            range(len(self._SPEED_STEPS)),
            key=lambda i: abs(self._SPEED_STEPS[i] - tps),
        )

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0  # seconds elapsed
            self._handle_events()
            if not self.paused:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_food()
        self._draw_bots()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_food(self) -> None:
        """Draw edible tiles as dark green squares."""
        cs = self.cell_size
        mask = self.engine.grid.food_mask()
        for row, col in zip(*mask.nonzero(), strict=True):
            pygame.draw.rect(self.screen, _FOOD, (col * cs, row * cs, cs, cs))

    def _draw_bots(self) -> None:
        """Draw each bot's label, coloured by state, centred on its cell."""
        cs = self.cell_size
        for bot in self.engine.bots:
            colour = _BOT_COLOURS.get(bot.state, _PANEL_TEXT)
            surf = self.label_font.render(bot.label, True, colour)
            rect = surf.get_rect(
                center=(bot.col * cs + cs // 2, bot.row * cs + cs // 2),
            )
            self.screen.blit(surf, rect)

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.engine.grid.width * self.cell_size + 10
        y = 10

        lines = [
            f"Tick: {self.engine.tick}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Bots ---",
        ]
        for state, count in self.engine.state_counts().items():
            lines.append(f"  {state.name}: {count}")
        lines += [
            f"Food: {self.engine.grid.food_count()}",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "Q/ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _PANEL_TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
