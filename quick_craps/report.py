"""
Human-readable summaries and charts of a session snapshot.
"""
from pathlib import Path
from typing import Union

from matplotlib.figure import Figure

PLAYER_COLORS = ['#ffd700', '#00ff00', '#ff4444', '#00aaff', '#ff00ff', '#ffa500']


def format_distribution(frequency: dict[int, int], width: int = 30) -> str:
    """
    Text bar chart of a dice histogram, one line per total it covers.

    Bars are scaled so the most frequent total fills `width` columns.
    """
    rolls = sum(frequency.values())
    peak = max(frequency.values(), default=0)
    lines = []
    for total, count in sorted(frequency.items()):
        share = count / rolls if rolls else 0.0
        bar = '█' * (count * width // peak if peak else 0)
        lines.append(f"{total:>2}: {bar:<{width}} {count:4d} ({share:6.2%})")
    return '\n'.join(lines)


def format_session(snapshot: dict) -> str:
    """Plain-text summary of `CrapsSession.stats()`."""
    dice = snapshot['dice']
    lines = [
        f"Seed: {snapshot['seed']}",
        f"Policy: {snapshot.get('policy', '-')}",
        f"Turns: {snapshot['total_turns']}  Rolls: {dice['total_rolls']}",
        "",
        "Dice distribution:",
        format_distribution(dice['frequency']),
    ]
    if dice.get('streaks'):
        lines.append("")
        lines.append("Streaks:")
        for name, streak in dice['streaks'].items():
            lines.append(f"  {name}: {streak['longest_streak']} in a row")

    lines.append("")
    lines.append(f"{'Player':<10} {'Buy-in':>8} {'Rail':>8} {'Net':>8} {'Turns':>6} {'Avg':>6} {'Long':>5}")
    for player in snapshot['players']:
        net = player['rail'] - player['buyin']
        lines.append(
            f"{player['name']:<10} {player['buyin']:>8} {player['rail']:>8} {net:>+8} "
            f"{player['turns']:>6} {player['avg_rolls_before_seven_out']:>6.2f} "
            f"{player['longest_roll']['rolls']:>5}"
        )
    return '\n'.join(lines)


def plot_roll_lengths(snapshot: dict, path: Union[str, Path]) -> Path:
    """Save a bar chart of turn lengths for every player."""
    players = snapshot['players']
    fig = Figure(figsize=(10.5, 4.5), facecolor='#1a0f2e')
    ax = fig.add_subplot(1, 1, 1)
    ax.set_facecolor('#2d1b4e')

    width = 0.8 / max(len(players), 1)
    for i, player in enumerate(players):
        lengths = player['roll_lengths']
        xs = [int(length) + i * width for length in lengths]
        ax.bar(xs, list(lengths.values()), width=width,
               color=PLAYER_COLORS[i % len(PLAYER_COLORS)], label=player['name'], alpha=0.9)

    ax.set_xlabel('Rolls Before Seven-Out', color='white', fontsize=10)
    ax.set_ylabel('Turns', color='white', fontsize=10)
    ax.tick_params(colors='white')
    if players:
        ax.legend(facecolor='#2d1b4e', labelcolor='white', loc='upper right', framealpha=0.95)
    fig.tight_layout()

    path = Path(path)
    fig.savefig(path, facecolor=fig.get_facecolor())
    return path
