import pygame, sys
import random
from tetris import Engine
from tetris_config import CONFIG, tick_interval_ms
from tetris_input import apply_action, make_controls
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import UniformRandom


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def new_game(seed_source):
    engine = Engine(rng=UniformRandom(rng=random.Random(seed_source.getrandbits(32))))
    engine.advance()  # first spawn, so there is a piece to steer right away
    return engine


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    # One seed drives both piece order and key shuffles
    seed_source = random.Random(CONFIG["SEED"])
    engine = Engine(rng=UniformRandom(rng=random.Random(seed_source.getrandbits(32))))
    dims = compute_dims(engine.width, engine.height)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris — hidden controls")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    controls = make_controls(random.Random(seed_source.getrandbits(32)))
    started = False
    paused = False
    reported = False
    acc = 0.0

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if e.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit()
            if e.key == pygame.K_r:
                engine = new_game(seed_source)
                controls.reshuffle()
                render = RenderAssets(dims, font, big_font)
                started, paused, reported, acc = True, False, False, 0.0
                continue
            if not started or engine.game_over:
                continue
            if e.key == pygame.K_p:
                paused = not paused
                continue
            if paused:
                continue
            action = controls.action_for(pygame.key.name(e.key))
            if action is not None:
                apply_action(engine, action)

        if started and not paused and not engine.game_over:
            acc += dt
            if acc >= tick_interval_ms(engine.level):
                acc = 0.0
                engine.advance()

        render.draw(screen, engine, controls.legend())
        if not started:
            render.draw_banner(screen, "TETRIS", "Press R to start")
        elif engine.game_over:
            if not reported:
                print(f"Game over. Final score: {engine.score}")
                reported = True
            render.draw_banner(screen, "Game Over!", f"Score {engine.score} • R to play again")
        elif paused:
            render.draw_banner(screen, "PAUSED", "P to resume")
        pygame.display.flip()


if __name__ == '__main__':
    main()
