import pygame

class Button:
    def __init__(self, rect, text, font, bg, fg):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.fg = fg

    def draw(self, surface):
        pygame.draw.rect(surface, self.bg, self.rect, border_radius=6)
        pygame.draw.rect(surface, (0, 0, 0), self.rect, width=2, border_radius=6)
        txt = self.font.render(self.text, True, self.fg)
        surface.blit(txt, txt.get_rect(center=self.rect.center))

    def contains(self, pos):
        return self.rect.collidepoint(pos)

    def is_clicked(self, event):
        return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.contains(event.pos)


def menu_buttons(labels, font, center_x, center_y, width=240, height=40, gap=12, bg=(60, 60, 60), fg=(245, 245, 245)):
    """Vertically stacked buttons centered on (center_x, center_y)."""
    total = len(labels) * height + (len(labels) - 1) * gap
    top = center_y - total // 2
    buttons = []
    for i, label in enumerate(labels):
        rect = (center_x - width // 2, top + i * (height + gap), width, height)
        buttons.append(Button(rect, label, font, bg, fg))
    return buttons
