"""Gesture drawing window.

Draw a stroke with the left mouse button; when templates exist it is
recognized as soon as the button is released. Type a name in the field
at the bottom and press "Add Template" to register the last stroke.

Keys:
    Ctrl+S  save the last stroke under the typed name
    Ctrl+L  load the gesture saved under the typed name as a template
    Ctrl+D  add the built-in shape templates
    Esc     clear the canvas
"""

from typing import Tuple

import pygame

from ..config.settings import AppConfig
from .session import GestureSession


class GestureApp:
    """Window and user interface for drawing and recognizing gestures."""

    def __init__(self, session: GestureSession, config=AppConfig) -> None:
        pygame.init()
        self.config = config
        self.session = session
        self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.label_font = pygame.font.Font(None, config.LABEL_FONT_SIZE)
        self.ui_font = pygame.font.Font(None, config.UI_FONT_SIZE)

        self.template_name = ""
        self.field_focused = False

        bottom = config.WINDOW_HEIGHT - 40
        center_x = config.WINDOW_WIDTH // 2
        self.name_field = pygame.Rect(center_x - 155, bottom, 200, 30)
        self.add_button = pygame.Rect(center_x + 50, bottom, 110, 30)

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.on_mouse_down(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    self.session.extend_stroke(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    if self.session.is_drawing:
                        self.session.end_stroke()
                elif event.type == pygame.KEYDOWN:
                    self.on_key(event)

            self.draw()
            clock.tick(self.config.FPS)

    def on_mouse_down(self, pos: Tuple[int, int]) -> None:
        if self.add_button.collidepoint(pos):
            self.session.add_template(self.template_name)
            return
        if self.name_field.collidepoint(pos):
            self.field_focused = True
            return

        self.field_focused = False
        self.session.begin_stroke(pos)

    def on_key(self, event) -> None:
        """Handle keyboard commands and text field editing."""
        if event.mod & pygame.KMOD_CTRL:
            if event.key == pygame.K_s:
                self.session.save_current(self.template_name)
            elif event.key == pygame.K_l:
                self.session.load_named(self.template_name)
            elif event.key == pygame.K_d:
                self.session.load_defaults()
            return

        if event.key == pygame.K_ESCAPE:
            self.session.clear()
        elif not self.field_focused:
            return
        elif event.key == pygame.K_BACKSPACE:
            self.template_name = self.template_name[:-1]
        elif event.key == pygame.K_RETURN:
            self.session.add_template(self.template_name)
        elif event.unicode and event.unicode.isprintable():
            self.template_name += event.unicode

    def draw(self) -> None:
        """Render the stroke, match label and controls."""
        config = self.config
        self.screen.fill(config.BACKGROUND)

        points = [(p.x, p.y) for p in self.session.path]
        if len(points) > 1:
            pygame.draw.lines(self.screen, config.STROKE_COLOR, False, points, config.STROKE_WIDTH)

        label = self.label_font.render(self.session.status_text, True, config.TEXT_COLOR)
        self.screen.blit(label, (10, 10))

        templates = self.session.recognizer.templates
        y = 40
        for template in templates:
            score = "" if template.last_score is None else f" {template.last_score:.2f}"
            text = self.ui_font.render(f"{template.name}{score}", True, config.TEXT_COLOR)
            self.screen.blit(text, (10, y))
            y += 18

        pygame.draw.rect(self.screen, config.FIELD_COLOR, self.name_field)
        if self.field_focused:
            pygame.draw.rect(self.screen, config.STROKE_COLOR, self.name_field, 1)
        name_text = self.ui_font.render(self.template_name, True, config.TEXT_COLOR)
        self.screen.blit(name_text, (self.name_field.x + 5, self.name_field.y + 8))

        pygame.draw.rect(self.screen, config.BUTTON_COLOR, self.add_button)
        button_text = self.ui_font.render("Add Template", True, config.TEXT_COLOR)
        self.screen.blit(button_text, (self.add_button.x + 10, self.add_button.y + 8))

        pygame.display.flip()

    def close(self) -> None:
        self.session.close()
        pygame.quit()
