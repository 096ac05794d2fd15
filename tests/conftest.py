import pytest

from bugsworld.dsl import Condition, call, block, if_, if_else, while_, instructions_to_block


@pytest.fixture
def scenarios():
    """Sample statements paired with their expected primitive-call counts."""
    return [
        (instructions_to_block(["move", "turnleft"]), 2),
        (if_(Condition.NEXT_IS_EMPTY, instructions_to_block(["move", "foo"])), 1),
        (
            while_(
                Condition.TRUE,
                block(
                    call("infect"),
                    if_else(
                        Condition.NEXT_IS_ENEMY,
                        instructions_to_block(["skip"]),
                        instructions_to_block(["turnright", "bar"]),
                    ),
                ),
            ),
            3,
        ),
        (block(), 0),
        (
            if_else(
                Condition.RANDOM,
                instructions_to_block(["skip", "skip"]),
                instructions_to_block(["move"]),
            ),
            3,
        ),
    ]
