import logging
import shutil

import matplotlib.animation as animation
import matplotlib.patches as patches
import matplotlib.pyplot as plt
from tqdm import tqdm

from labyrinth.config import (BG_COLOR, CELL_MARKER_SIZE, DPI, END_COLOR, FIG_HEIGHT, FIG_WIDTH,
                              PATH_COLOR, START_COLOR, TARGET_FPS, WALL_COLOR)
from labyrinth.grid import Cell

logger = logging.getLogger(__name__)


class TqdmProgressCallback:
    def __init__(self, total):
        self.pbar = tqdm(total=total, desc="Saving Animation", unit="frame", ncols=100)

    def __call__(self, current_frame, total_frames):
        self.pbar.update(1)

    def close(self):
        self.pbar.close()


def _add_cells(axes, points, color, alpha=1.0, zorder=1):
    added = []
    offset = CELL_MARKER_SIZE / 2
    for x, y in points:
        rect = patches.Rectangle(
            (x - offset, y - offset), CELL_MARKER_SIZE, CELL_MARKER_SIZE,
            fill=True, color=color, alpha=alpha, linewidth=0, zorder=zorder
        )
        axes.add_patch(rect)
        added.append(rect)
    return added


def create_animation(session, frames=None, fps=TARGET_FPS):
    """
    Replay the session's step trace as a matplotlib animation.

    Each animation frame feeds one frame interval of time to the player, so
    one trace step is shown per frame. ``frames`` defaults to one full loop
    of the trace plus a closing frame.
    """
    if not session.player.is_loaded:
        session.enter()
    player = session.player
    maze = session.maze
    if frames is None:
        frames = len(player.steps) + 1

    fig, axes = plt.subplots(figsize=(FIG_WIDTH, FIG_HEIGHT), dpi=DPI)
    fig.patch.set_facecolor(BG_COLOR)
    axes.set_facecolor(BG_COLOR)
    axes.set_aspect('equal')
    axes.axis('off')

    half_width = maze.width / 2
    half_height = maze.height / 2
    axes.set_xlim(-half_width, half_width)
    axes.set_ylim(-half_height, half_height)

    _add_cells(axes, session.wall_points(), WALL_COLOR, alpha=0.8, zorder=5)
    _add_cells(axes, session.marker_points(Cell.ENTRY), START_COLOR, zorder=10)
    _add_cells(axes, session.marker_points(Cell.EXIT), END_COLOR, zorder=10)
    title = axes.set_title(maze.name, color='white', fontsize=16, weight='bold')

    path_patches = []

    def update(i):
        nonlocal path_patches
        if i > 0:
            player.tick(player.frame_interval)
        for rect in path_patches:
            rect.remove()
        path_patches = _add_cells(axes, session.path_points(), PATH_COLOR, alpha=0.9, zorder=20)
        title.set_text(f"{maze.name}  step {player.cursor}/{len(player.steps)}")
        return path_patches

    ani = animation.FuncAnimation(
        fig,
        update,
        frames=frames,
        blit=False,
        interval=1000 / fps,
        repeat=True
    )
    return ani, fig


def save_animation(ani, fig, output_file, frames, fps=TARGET_FPS):
    """Write the animation to a video, or to a GIF when the name ends in .gif."""
    if output_file.lower().endswith('.gif'):
        writer = animation.PillowWriter(fps=fps)
    else:
        ffmpeg_path = shutil.which('ffmpeg')
        if not ffmpeg_path:
            logger.warning("ffmpeg not found; saving will likely fail.")
        else:
            plt.rcParams['animation.ffmpeg_path'] = ffmpeg_path
        writer = animation.FFMpegWriter(
            fps=fps,
            metadata=dict(artist='Labyrinth Trace'),
            bitrate=3000,
            extra_args=['-vcodec', 'libx264', '-pix_fmt', 'yuv420p']
        )

    progress_bar = TqdmProgressCallback(frames)
    logger.info(f"Saving animation to {output_file}...")
    try:
        ani.save(output_file, writer=writer, dpi=DPI, progress_callback=progress_bar)
    finally:
        progress_bar.close()
        plt.close(fig)
    logger.info(f"Animation saved to {output_file}")
