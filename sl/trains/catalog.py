"""Built-in ASCII-art trains."""

from __future__ import annotations

from sl.animation import FRAME_DELIMITER
from sl.trains.definition import TrainDefinition

D51_TOP = """\
      ====        ________                ___________
  _D _|  |_______/        \\__I_I_____===__|_________|
   |(_)---  |   H\\________/ |   |        =|___ ___|
   /     |  |   H  |  |     |   |         ||_| |_||
  |      |  |   H  |__--------------------| [___] |
  | ________|___H__/__|_____/[][]~\\_______|       |
  |/ |   |-----------I_____I [][] []  D   |=======|__
"""

D51_WHEELS = [
    """\
__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__
 |/-=|___|=    ||    ||    ||    |_____/~\\___/
  \\_/      \\O=====O=====O=====O_/      \\_/""",
    """\
__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__
 |/-=|___|=    ||    ||    ||    |_____/~\\___/
  \\_/      \\_O=====O=====O=====O/      \\_/""",
    """\
__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__
 |/-=|___|=   O=====O=====O=====O|_____/~\\___/
  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/""",
    """\
__/ =| o |=-~O=====O=====O=====O\\ ____Y___________|__
 |/-=|___|=    ||    ||    ||    |_____/~\\___/
  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/""",
    """\
__/ =| o |=-O=====O=====O=====O \\ ____Y___________|__
 |/-=|___|=    ||    ||    ||    |_____/~\\___/
  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/""",
    """\
__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__
 |/-=|___|=O=====O=====O=====O   |_____/~\\___/
  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/""",
]

C51_TOP = """\
        ___
       _|_|_  _     __       __             ___________
    D__/   \\_(_)___|  |__H__|  |_____I_Ii_()|_________|
     | `---'   |:: `--'  H  `--'         |  |___ ___|
    +|~~~~~~~~++::~~~~~~~H~~+=====+~~~~~~|~~||_| |_||
    ||        | ::       H  +=====+      |  |::  ...|
|    | _______|_::-----------------[][]-----|       |
"""

C51_BOILER = "| /~~ ||   |-----/~~~~\\  /[I_____I][][] --|||_______|__"
C51_TENDER = "\\_/         \\_/  \\____/  \\____/  \\____/      \\_/      "

C51_RODS = [
    (
        "------'|oOo|==[]=-     ||      ||      |  ||=======_|__",
        "/~\\____|___|/~\\_|   O=======O=======O  |__|+-/~\\_|    ",
    ),
    (
        "------'|oOo|===[]=-    ||      ||      |  ||=======_|__",
        "/~\\____|___|/~\\_|    O=======O=======O |__|+-/~\\_|    ",
    ),
    (
        "------'|oOo|===[]=- O=======O=======O  |  ||=======_|__",
        "/~\\____|___|/~\\_|      ||      ||      |__|+-/~\\_|    ",
    ),
    (
        "------'|oOo|==[]=- O=======O=======O   |  ||=======_|__",
        "/~\\____|___|/~\\_|      ||      ||      |__|+-/~\\_|    ",
    ),
    (
        "------'|oOo|=[]=- O=======O=======O    |  ||=======_|__",
        "/~\\____|___|/~\\_|      ||      ||      |__|+-/~\\_|    ",
    ),
    (
        "------'|oOo|=[]=-      ||      ||      |  ||=======_|__",
        "/~\\____|___|/~\\_|  O=======O=======O   |__|+-/~\\_|    ",
    ),
]

LOGO_TOP = [
    "     ++      +------ ",
    "     ||      |+-+ |  ",
    "   /---------|| | |  ",
    "  + ========  +-+ |  ",
]

LOGO_WHEELS = [
    (" _|--O========O~\\-+  ", "//// \\_/      \\_/    "),
    (" _|--/O========O\\-+  ", "//// \\_/      \\_/    "),
    (" _|--/~O========O-+  ", "//// \\_/      \\_/    "),
    (" _|--/~\\------/~\\-+  ", "//// \\_O========O    "),
    (" _|--/~\\------/~\\-+  ", "//// \\O========O/    "),
    (" _|--/~\\------/~\\-+  ", "//// O========O_/    "),
]

LOGO_COAL = [
    "____                 ",
    "|   \\@@@@@@@@@@@     ",
    "|    \\@@@@@@@@@@@@@_ ",
    "|                  | ",
    "|__________________| ",
    "   (O)       (O)     ",
]

LOGO_CAR = [
    "____________________ ",
    "|  ___ ___ ___ ___ | ",
    "|  |_| |_| |_| |_| | ",
    "|__________________| ",
    "|__________________| ",
    "   (O)        (O)    ",
]

SMOKE = [
    """\
                (  ) (@@) (  )  (@)  ()   @   O   @   O   @   O   @   O   @
             (@@@)
         (   )
     (@@@@)
  (    )

(@@@@)""",
    """\
                (@@) (  ) (@@)  ( )  ()   O   @   O   @   O   @   O   @   O
             (   )
         (@@@)
     (    )
  (@@@@)

(    )""",
]


def _join_frames(frames: list[str]) -> str:
    return FRAME_DELIMITER.join(frames)


def smoke_animation() -> str:
    return _join_frames(SMOKE)


def d51_animation() -> str:
    return _join_frames([D51_TOP + wheels for wheels in D51_WHEELS])


def c51_animation() -> str:
    frames = []
    for upper_rod, lower_rod in C51_RODS:
        frames.append(C51_TOP + "\n".join([C51_BOILER, upper_rod, lower_rod, C51_TENDER]))
    return _join_frames(frames)


def logo_animation() -> str:
    frames = []
    for wheels in LOGO_WHEELS:
        engine = LOGO_TOP + list(wheels)
        lines = [
            engine_line + coal + car + car
            for engine_line, coal, car in zip(engine, LOGO_COAL, LOGO_CAR)
        ]
        frames.append("\n".join(lines))
    return _join_frames(frames)


def d51_train() -> TrainDefinition:
    """The classic D51 steam locomotive."""
    return TrainDefinition(
        name="d51",
        train=d51_animation(),
        train_animation_speed=1,
        smoke=smoke_animation(),
        smoke_offset=4,
        smoke_animation_speed=4,
    )


def c51_train() -> TrainDefinition:
    return TrainDefinition(
        name="c51",
        train=c51_animation(),
        train_animation_speed=1,
        smoke=smoke_animation(),
        smoke_offset=5,
        smoke_animation_speed=4,
    )


def logo_train() -> TrainDefinition:
    """The small LOGO engine pulling a coal car and two coaches."""
    return TrainDefinition(
        name="logo",
        train=logo_animation(),
        train_animation_speed=2,
        smoke=smoke_animation(),
        smoke_offset=3,
        smoke_animation_speed=4,
    )


def builtin_trains() -> list[TrainDefinition]:
    """Every built-in train, in the order ``--number`` indexes them."""
    return [d51_train(), c51_train(), logo_train()]


__all__ = [
    "builtin_trains",
    "c51_train",
    "d51_train",
    "logo_train",
    "smoke_animation",
]
