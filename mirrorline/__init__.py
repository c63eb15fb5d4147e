"""mirrorline - A mirrored line-drawing arcade game on a fixed-timestep loop."""

from mirrorline.clock import Clock
from mirrorline.config import GameSettings
from mirrorline.engine import Engine
from mirrorline.events import Event, EventLog
from mirrorline.game import Game, Score
from mirrorline.geometry import Block, Node, NodeType
from mirrorline.input import InputBuffer, InputFrame
from mirrorline.line import Line, LineOutcome, extend_line
from mirrorline.messages import Message, MessageCursor, MessageScheduler
from mirrorline.render import Surface, render
from mirrorline.stages import StageDiagnostic, StageLayout, load_stage, parse_stage
from mirrorline.systems import make_render_system, make_update_system
from mirrorline.types import GameState, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "Game",
    "GameState",
    "GameSettings",
    "Score",
    "Node",
    "NodeType",
    "Block",
    "StageLayout",
    "StageDiagnostic",
    "parse_stage",
    "load_stage",
    "Message",
    "MessageCursor",
    "MessageScheduler",
    "InputBuffer",
    "InputFrame",
    "Line",
    "LineOutcome",
    "extend_line",
    "Surface",
    "render",
    "Event",
    "EventLog",
    "make_update_system",
    "make_render_system",
]
