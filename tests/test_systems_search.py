from gridpath.core.world import World
from gridpath.search.engine import EngineState, StepOutcome
from gridpath.systems.search_system import SearchSystem
from gridpath.utils import observer


def _make_world():
    world = World(4)
    world.set_start((0, 0))
    world.set_goal((3, 3))
    return world


def test_update_is_noop_when_idle():
    world = _make_world()
    system = SearchSystem(world)
    assert system.update() is None
    assert world.state is EngineState.IDLE


def test_update_closes_one_cell_per_tick():
    world = _make_world()
    system = SearchSystem(world)
    world.begin_search(animate=True)

    result = system.update()
    assert result.outcome is StepOutcome.EXPANDED
    assert world.engine.popped == 1
    system.update()
    assert world.engine.popped == 2


def test_update_respects_pause():
    world = _make_world()
    system = SearchSystem(world)
    world.begin_search(animate=True)
    world.paused = True
    assert system.update() is None
    assert world.engine.popped == 0


def test_runs_to_completion_and_records_timing():
    observer._step_durations.clear()
    world = _make_world()
    system = SearchSystem(world, steps_per_tick=3)
    world.begin_search(animate=True)
    ticks = 0
    while world.state is EngineState.RUNNING:
        system.update()
        ticks += 1
    assert world.state is EngineState.SUCCEEDED
    assert system.last_result.outcome is StepOutcome.SUCCEEDED
    assert len(observer._step_durations) >= world.engine.popped // 3
    assert ticks <= world.engine.popped
