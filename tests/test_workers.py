"""Tests for solid_examples.domain.workers — fat vs. segregated interfaces."""

import pytest

from solid_examples.domain.workers import (
    ArchitectureDesignable,
    CodeManager,
    CodeTestable,
    CodeWritable,
    Deployable,
    Developer,
    Eatable,
    GoodHumanWorker,
    GoodRobotWorker,
    HumanResourceManager,
    HumanWorker,
    Payable,
    RobotWorker,
    Sleepable,
    Workable,
    WorkManager,
    Worker,
)


class TestFatInterface:

    def test_worker_is_abstract(self):
        with pytest.raises(TypeError):
            Worker()

    @pytest.mark.parametrize(
        "method, message",
        [
            ("write_code", "Humans don't write code"),
            ("design_architecture", "Humans don't design architecture"),
            ("test_code", "Humans don't test code"),
            ("deploy", "Humans don't deploy"),
        ],
    )
    def test_human_unsupported(self, method, message):
        with pytest.raises(NotImplementedError, match=message):
            getattr(HumanWorker(), method)()

    @pytest.mark.parametrize(
        "method", ["work", "eat", "sleep", "get_paid", "take_vacation", "attend_meeting"]
    )
    def test_robot_unsupported(self, method):
        with pytest.raises(NotImplementedError, match="Robots don't"):
            getattr(RobotWorker(), method)()

    def test_human_supported(self, capsys):
        human = HumanWorker()
        human.work()
        human.get_paid()
        assert capsys.readouterr().out == "Human working\nHuman getting paid\n"

    def test_fat_interface_fools_capability_checks(self):
        # The bad robot claims to be able to eat.
        assert isinstance(RobotWorker(), Eatable)


class TestSegregatedInterfaces:

    def test_human_capabilities(self):
        human = GoodHumanWorker()
        assert isinstance(human, Workable)
        assert isinstance(human, Eatable)
        assert isinstance(human, Payable)
        assert not isinstance(human, CodeWritable)
        assert not isinstance(human, Deployable)

    def test_robot_capabilities(self):
        robot = GoodRobotWorker()
        assert isinstance(robot, Workable)
        assert isinstance(robot, ArchitectureDesignable)
        assert isinstance(robot, Deployable)
        assert not isinstance(robot, Eatable)
        assert not isinstance(robot, Sleepable)
        assert not hasattr(robot, "eat")

    def test_developer_capabilities(self):
        dev = Developer()
        assert isinstance(dev, CodeWritable)
        assert isinstance(dev, CodeTestable)
        assert isinstance(dev, Sleepable)
        assert not isinstance(dev, Deployable)
        assert not isinstance(dev, ArchitectureDesignable)

    def test_robot_output(self, capsys):
        robot = GoodRobotWorker()
        robot.work()
        robot.deploy()
        assert capsys.readouterr().out == "Robot working\nRobot deploying\n"


class TestManagers:

    def test_work_manager_accepts_any_workable(self, capsys):
        manager = WorkManager()
        for worker in (GoodHumanWorker(), GoodRobotWorker(), Developer()):
            manager.manage_work(worker)
        assert capsys.readouterr().out.splitlines() == [
            "Human working",
            "Robot working",
            "Developer working",
        ]

    def test_code_manager(self, capsys):
        CodeManager().manage_code(GoodRobotWorker())
        assert capsys.readouterr().out == "Robot writing code\n"

    def test_hr_manager(self, capsys):
        dev = Developer()
        HumanResourceManager().manage_human(dev, dev, dev)
        assert capsys.readouterr().out.splitlines() == [
            "Developer working",
            "Developer eating",
            "Developer sleeping",
        ]
