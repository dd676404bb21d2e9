"""
forecast_net module: render/renderer.py

Pygame rendering of the network trace and prediction results.
Only reads core results; steps beyond `revealed` are drawn idle.
"""

from __future__ import annotations
from typing import Dict, Tuple
import pygame

import config
from neural.neuron import NeuronLayer
from render import colors
from weather.prediction import Prediction

NETWORK_W = 560

_LAYER_COLORS = {
    NeuronLayer.INPUT: colors.INPUT,
    NeuronLayer.HIDDEN: colors.HIDDEN,
    NeuronLayer.OUTPUT: colors.OUTPUT,
}
_INPUT_LABELS = ("temp", "humidity", "wind", "solar")


def neuron_positions(width: int, height: int) -> Dict[str, Tuple[int, int]]:
    """
    Three columns: inputs left, hidden middle, single output right.
    """
    spacing = width / 4
    x0 = spacing / 2
    pos: Dict[str, Tuple[int, int]] = {}
    for i in range(4):
        y = int(height * (0.15 + i * 0.2))
        pos[f"input-{i}"] = (int(x0), y)
        pos[f"hidden-{i}"] = (int(x0 + spacing * 1.5), y)
    pos["output-0"] = (int(x0 + spacing * 3), int(height * 0.45))
    return pos


def _blend(col: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    t = max(0.0, min(1.0, t))
    return tuple(int(c0 + (c1 - c0) * t) for c0, c1 in zip(colors.IDLE, col))


def draw_network(screen: pygame.Surface, prediction: Prediction, revealed: int) -> None:
    result = prediction.result
    pos = neuron_positions(NETWORK_W, config.SCREEN_H)
    font = pygame.font.Font(None, 20)

    # connections first
    for c in result.connections_through(revealed):
        a = pos[c.src]
        b = pos[c.dst]
        if c.activated:
            col = colors.CONN_POS if c.weight >= 0 else colors.CONN_NEG
        else:
            col = colors.CONN_IDLE
        width = max(1, int(abs(c.weight) * 4))
        pygame.draw.line(screen, col, a, b, width)

    active = set()
    for step in result.steps:
        if step.step <= revealed:
            active.update(step.active_neurons)

    for n in result.neurons:
        x, y = pos[n.id]
        lit = n.id in active
        col = _blend(_LAYER_COLORS[n.layer], 0.35 + 0.65 * n.value) if lit else colors.IDLE
        radius = 26 if n.layer == NeuronLayer.OUTPUT else 20
        pygame.draw.circle(screen, col, (x, y), radius)
        pygame.draw.circle(screen, colors.TEXT if lit else colors.MUTED, (x, y), radius, 1)

        if lit:
            txt = font.render(f"{n.value:.3f}", True, colors.TEXT)
            screen.blit(txt, (x - txt.get_width() // 2, y - 6))
        if n.layer == NeuronLayer.INPUT:
            label = font.render(_INPUT_LABELS[n.index], True, colors.MUTED)
            screen.blit(label, (x - label.get_width() // 2, y + radius + 4))


def draw_calculations(screen: pygame.Surface, prediction: Prediction, revealed: int) -> None:
    x = NETWORK_W + 10
    rect = pygame.Rect(x, 10, 250, config.SCREEN_H - 20)
    pygame.draw.rect(screen, colors.PANEL, rect, border_radius=6)

    title = pygame.font.Font(None, 24)
    font = pygame.font.Font(None, 18)
    y = rect.y + 10
    for step in prediction.result.steps:
        if step.step > revealed:
            break
        head = title.render(f"Step {step.step}", True, colors.TEXT)
        screen.blit(head, (x + 10, y))
        y += 20
        desc = font.render(step.description[:40], True, colors.MUTED)
        screen.blit(desc, (x + 10, y))
        y += 18
        for calc in step.calculations:
            line = font.render(f"{calc.neuron_id}: {calc.formula}", True, colors.TEXT)
            screen.blit(line, (x + 14, y))
            y += 16
        y += 10


def draw_results(screen: pygame.Surface, prediction: Prediction, complete: bool) -> None:
    x = NETWORK_W + 270
    rect = pygame.Rect(x, 10, config.SCREEN_W - x - 10, config.SCREEN_H - 20)
    pygame.draw.rect(screen, colors.PANEL, rect, border_radius=6)

    big = pygame.font.Font(None, 40)
    font = pygame.font.Font(None, 20)
    y = rect.y + 12
    if not complete:
        screen.blit(font.render("Propagating...", True, colors.MUTED), (x + 12, y))
        return

    pct = big.render(f"{prediction.value * 100:.1f}%", True, colors.TEXT)
    screen.blit(pct, (x + 12, y))
    screen.blit(font.render(prediction.level, True, colors.MUTED), (x + 16 + pct.get_width(), y + 10))
    y += 44

    bar_w = rect.w - 24
    pygame.draw.rect(screen, colors.BAR_BG, (x + 12, y, bar_w, 10), border_radius=4)
    pygame.draw.rect(screen, colors.OUTPUT, (x + 12, y, int(bar_w * prediction.value), 10), border_radius=4)
    y += 30

    screen.blit(font.render("Feature importance", True, colors.TEXT), (x + 12, y))
    y += 24
    for idx, f in enumerate(prediction.importances):
        screen.blit(font.render(f"{f.feature}  {f.importance:.1f}%", True, colors.TEXT), (x + 12, y))
        y += 18
        pygame.draw.rect(screen, colors.BAR_BG, (x + 12, y, bar_w, 8), border_radius=3)
        fill = int(bar_w * f.importance / 100.0)
        pygame.draw.rect(screen, colors.BARS[idx % len(colors.BARS)], (x + 12, y, fill, 8), border_radius=3)
        y += 12
        screen.blit(font.render(f"contribution {f.contribution:.4f}", True, colors.MUTED), (x + 12, y))
        y += 24


def draw_hud(screen: pygame.Surface, preset_name: str, expected: str) -> None:
    font = pygame.font.Font(None, 22)
    lines = [
        f"Scenario: {preset_name}",
        expected,
        "1-5 preset   R replay   TAB calculations   ESC quit",
    ]
    y = config.SCREEN_H - 70
    for line in lines:
        txt = font.render(line, True, colors.MUTED)
        screen.blit(txt, (12, y))
        y += 20
