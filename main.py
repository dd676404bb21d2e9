"""
Live viewer: pick a weather scenario and watch the forward pass unfold step by step.
"""

from __future__ import annotations
import logging
import pygame

import config
from logging_utils import configure_logging
from render import colors
from render.renderer import draw_calculations, draw_hud, draw_network, draw_results
from weather.prediction import Prediction, predict
from weather.presets import PRESETS, PresetScenario, get_preset

logger = logging.getLogger(__name__)

_PRESET_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
}


def run_scenario(preset: PresetScenario) -> Prediction:
    prediction = predict(preset.reading)
    logger.info(
        "scenario '%s': prediction %.4f (%s), top feature %s",
        preset.name,
        prediction.value,
        prediction.level,
        prediction.top_feature.feature,
    )
    return prediction


def main():
    configure_logging(config.LOG_LEVEL, json_logs=config.JSON_LOGS)

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("forecast_net (Forward Propagation)")
    clock = pygame.time.Clock()

    preset = get_preset(config.DEFAULT_PRESET)
    prediction = run_scenario(preset)
    n_steps = len(prediction.result.steps)

    revealed = 0
    since_reveal = 0.0
    show_calcs = True
    running = True

    while running:
        dt = clock.tick(config.FPS) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_TAB:
                    show_calcs = not show_calcs
                elif e.key == pygame.K_r:
                    revealed, since_reveal = 0, 0.0
                elif e.key in _PRESET_KEYS:
                    preset = PRESETS[_PRESET_KEYS[e.key]]
                    prediction = run_scenario(preset)
                    revealed, since_reveal = 0, 0.0

        # staged reveal of the already-computed trace, one step at a time
        if revealed < n_steps:
            since_reveal += dt
            if since_reveal >= config.STEP_REVEAL_SECONDS:
                since_reveal = 0.0
                revealed += 1

        screen.fill(colors.BG)
        draw_network(screen, prediction, revealed)
        if show_calcs:
            draw_calculations(screen, prediction, revealed)
        draw_results(screen, prediction, complete=revealed >= n_steps)
        draw_hud(screen, preset.name, preset.expected_outcome)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
