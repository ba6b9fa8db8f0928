import pygame
from tetris_game import MENU, PAUSED, GAME_OVER_STATE

MESSAGES = {
    MENU: ("NEON TETRIS", "Press Enter to start"),
    PAUSED: ("PAUSED", "Space / P to resume"),
    GAME_OVER_STATE: ("GAME OVER", "Enter or N to play again"),
}

class Overlay:
    """Banner drawn over the board for every state except playing."""
    def __init__(self, big_font, font):
        self.big_font=big_font; self.font=font
        self._cache={}

    def lines_for(self, state):
        return MESSAGES.get(state)

    def _surfaces(self, state):
        if state not in self._cache:
            title,hint=MESSAGES[state]
            self._cache[state]=(self.big_font.render(title,True,(255,0,255)),
                                self.font.render(hint,True,(220,230,255)))
        return self._cache[state]

    def draw(self,screen,state,dims,score=None):
        if self.lines_for(state) is None: return
        s=pygame.Surface((dims.board_w,dims.board_h),pygame.SRCALPHA); s.fill((10,10,25,200))
        screen.blit(s,(dims.board_x,dims.board_y))
        title,hint=self._surfaces(state)
        cx=dims.board_x+dims.board_w//2; cy=dims.board_y+dims.board_h//2
        screen.blit(title,title.get_rect(center=(cx,cy-24)))
        screen.blit(hint,hint.get_rect(center=(cx,cy+14)))
        if state==GAME_OVER_STATE and score is not None:
            sc=self.font.render(f"Final score: {score}",True,(200,210,240))
            screen.blit(sc,sc.get_rect(center=(cx,cy+40)))
