"""
Workers (Interface Segregation Principle).

BAD: `Worker` is a fat interface with ten operations. `HumanWorker` and
`RobotWorker` must implement all of them, so they expose operations they
cannot perform and fail at call time with NotImplementedError.

GOOD: one single-method protocol per capability. Each worker implements
only the capabilities it really has, and each manager depends only on the
capabilities it uses. An unsupported operation simply does not exist on the
object, so there is nothing to fail at call time.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


# ── BAD EXAMPLE ─────────────────────────────────────────────────────


class Worker(ABC):
    """Fat interface: every worker must implement all ten operations."""

    @abstractmethod
    def work(self) -> None: ...

    @abstractmethod
    def eat(self) -> None: ...

    @abstractmethod
    def sleep(self) -> None: ...

    @abstractmethod
    def get_paid(self) -> None: ...

    @abstractmethod
    def take_vacation(self) -> None: ...

    @abstractmethod
    def attend_meeting(self) -> None: ...

    @abstractmethod
    def write_code(self) -> None: ...

    @abstractmethod
    def design_architecture(self) -> None: ...

    @abstractmethod
    def test_code(self) -> None: ...

    @abstractmethod
    def deploy(self) -> None: ...


class HumanWorker(Worker):
    """Can do the human operations; the technical ones raise NotImplementedError."""

    def work(self) -> None:
        print("Human working")

    def eat(self) -> None:
        print("Human eating")

    def sleep(self) -> None:
        print("Human sleeping")

    def get_paid(self) -> None:
        print("Human getting paid")

    def take_vacation(self) -> None:
        print("Human taking vacation")

    def attend_meeting(self) -> None:
        print("Human attending meeting")

    # Forced on us by the fat interface.
    def write_code(self) -> None:
        raise NotImplementedError("Humans don't write code")

    def design_architecture(self) -> None:
        raise NotImplementedError("Humans don't design architecture")

    def test_code(self) -> None:
        raise NotImplementedError("Humans don't test code")

    def deploy(self) -> None:
        raise NotImplementedError("Humans don't deploy")


class RobotWorker(Worker):
    """Can do the technical operations; the human ones raise NotImplementedError."""

    def write_code(self) -> None:
        print("Robot writing code")

    def design_architecture(self) -> None:
        print("Robot designing architecture")

    def test_code(self) -> None:
        print("Robot testing code")

    def deploy(self) -> None:
        print("Robot deploying")

    # Forced on us by the fat interface.
    def work(self) -> None:
        raise NotImplementedError("Robots don't work like humans")

    def eat(self) -> None:
        raise NotImplementedError("Robots don't eat")

    def sleep(self) -> None:
        raise NotImplementedError("Robots don't sleep")

    def get_paid(self) -> None:
        raise NotImplementedError("Robots don't get paid")

    def take_vacation(self) -> None:
        raise NotImplementedError("Robots don't take vacation")

    def attend_meeting(self) -> None:
        raise NotImplementedError("Robots don't attend meetings")


# ── GOOD EXAMPLE ────────────────────────────────────────────────────
# One capability per protocol. runtime_checkable so isinstance() can
# answer "can this worker do X?" without a try/except.


@runtime_checkable
class Workable(Protocol):
    """Can work."""

    def work(self) -> None: ...


@runtime_checkable
class Eatable(Protocol):
    """Can eat."""

    def eat(self) -> None: ...


@runtime_checkable
class Sleepable(Protocol):
    """Can sleep."""

    def sleep(self) -> None: ...


@runtime_checkable
class Payable(Protocol):
    """Can get paid."""

    def get_paid(self) -> None: ...


@runtime_checkable
class Vacationable(Protocol):
    """Can take a vacation."""

    def take_vacation(self) -> None: ...


@runtime_checkable
class MeetingAttendable(Protocol):
    """Can attend meetings."""

    def attend_meeting(self) -> None: ...


@runtime_checkable
class CodeWritable(Protocol):
    """Can write code."""

    def write_code(self) -> None: ...


@runtime_checkable
class ArchitectureDesignable(Protocol):
    """Can design architecture."""

    def design_architecture(self) -> None: ...


@runtime_checkable
class CodeTestable(Protocol):
    """Can test code."""

    def test_code(self) -> None: ...


@runtime_checkable
class Deployable(Protocol):
    """Can deploy."""

    def deploy(self) -> None: ...


class GoodHumanWorker:
    """Workable, Eatable, Sleepable, Payable, Vacationable, MeetingAttendable."""

    def work(self) -> None:
        print("Human working")

    def eat(self) -> None:
        print("Human eating")

    def sleep(self) -> None:
        print("Human sleeping")

    def get_paid(self) -> None:
        print("Human getting paid")

    def take_vacation(self) -> None:
        print("Human taking vacation")

    def attend_meeting(self) -> None:
        print("Human attending meeting")


class GoodRobotWorker:
    """Workable, CodeWritable, ArchitectureDesignable, CodeTestable, Deployable."""

    def work(self) -> None:
        print("Robot working")

    def write_code(self) -> None:
        print("Robot writing code")

    def design_architecture(self) -> None:
        print("Robot designing architecture")

    def test_code(self) -> None:
        print("Robot testing code")

    def deploy(self) -> None:
        print("Robot deploying")


class Developer:
    """Everything a human does, plus writing and testing code."""

    def work(self) -> None:
        print("Developer working")

    def eat(self) -> None:
        print("Developer eating")

    def sleep(self) -> None:
        print("Developer sleeping")

    def get_paid(self) -> None:
        print("Developer getting paid")

    def take_vacation(self) -> None:
        print("Developer taking vacation")

    def attend_meeting(self) -> None:
        print("Developer attending meeting")

    def write_code(self) -> None:
        print("Developer writing code")

    def test_code(self) -> None:
        print("Developer testing code")


# Managers depend on the narrowest protocol that covers what they call.


class WorkManager:
    """Needs only Workable."""

    def manage_work(self, worker: Workable) -> None:
        worker.work()


class CodeManager:
    """Needs only CodeWritable."""

    def manage_code(self, coder: CodeWritable) -> None:
        coder.write_code()


class HumanResourceManager:
    """Needs Workable, Eatable and Sleepable, possibly from different objects."""

    def manage_human(self, worker: Workable, eater: Eatable, sleeper: Sleepable) -> None:
        worker.work()
        eater.eat()
        sleeper.sleep()
