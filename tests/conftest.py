import pytest

from gridfilter.lib.conditions import ConditionCollection, ConditionRegistry
from gridfilter.lib.operations import OperationRegistry, conjunction, disjunction


class HookRecorder:
    """Collects (event, args) tuples fired by a ConditionCollection."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def listener(self, event: str):
        def _record(*args):
            self.calls.append((event, *args))

        return _record

    def attach(self, collection, events):
        for event in events:
            collection.add_local_hook(event, self.listener(event))
        return self

    @property
    def events(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def collection():
    c = ConditionCollection()
    yield c
    c.destroy()


@pytest.fixture
def recorder():
    return HookRecorder()


@pytest.fixture
def fake_condition_registry():
    """Registry with deterministic predicates independent from the builtins."""
    reg = ConditionRegistry()
    reg.register("always_true", lambda cell, args: True, inputs_count=0)
    reg.register("always_false", lambda cell, args: False, inputs_count=0)
    reg.register("is_equal_to", lambda cell, args: cell.value == args[0])
    return reg


@pytest.fixture
def fake_operation_registry():
    reg = OperationRegistry()
    reg.register("conjunction", conjunction)
    reg.register("disjunction", disjunction)
    return reg


@pytest.fixture
def fake_collection(fake_condition_registry, fake_operation_registry):
    return ConditionCollection(
        condition_registry=fake_condition_registry,
        operation_registry=fake_operation_registry,
    )
