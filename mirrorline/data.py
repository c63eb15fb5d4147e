"""Default stage layouts and message scripts.

Nodes in the lower half of the canvas can only be reached through the
mirrored field: a sample at (x%, y%) also tests (100-x%, 100-y%).
"""
from __future__ import annotations

from mirrorline.messages import Message

STAGES: list[str] = [
    "S(10,25);E(90,25)",
    "S(10,20);C(50,35);E(90,20)",
    "S(10,25);B(45,0,10,35);C(50,45);E(90,25)",
    "S(10,10);C(30,70);C(70,40);E(90,10)",
    "S(5,40);B(20,20,5,30);B(75,50,5,30);C(50,20);E(95,40)",
]


def _replied(game) -> bool:
    return game.reply_count > 0


MESSAGES: dict[int, list[Message]] = {
    0: [
        Message("Is anyone there?"),
        Message("Draw from the green node to the red one.", delay=40),
        Message("Hold REPLY if you can hear me.", delay=60, await_reply=True),
        Message("...", delay=80),
        Message(
            "You answered. Good.",
            condition=_replied,
        ),
    ],
    1: [
        Message("Whatever you draw up there, I see down here.", delay=20),
        Message("Touch every node before the end.", delay=60),
    ],
    2: [
        Message("Walls are in the way now.", delay=20, await_reply=True),
        Message("They stop me too.", delay=100),
    ],
    3: [
        Message("Some nodes are only on my side.", delay=20),
        Message("Reach them through me.", delay=60),
        Message(
            "You keep answering. Thank you.",
            condition=lambda game: game.reply_count > 1,
            delay=40,
        ),
    ],
}
