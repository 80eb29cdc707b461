"""Tests for solid_examples.runner — the demo narrative."""

import pytest

from solid_examples.domain.models import Principle
from solid_examples.runner import SolidDemoRunner
from solid_examples.services.factory import ServiceContainer


def _run(capsys, principles=None, services=None) -> str:
    SolidDemoRunner(services).run(principles)
    return capsys.readouterr().out


class TestRun:

    def test_all_demos_in_order(self, capsys):
        out = _run(capsys)
        positions = [out.index(f"({p.name})") for p in Principle]
        assert positions == sorted(positions)
        assert "All SOLID principles demonstrated successfully!" in out
        for principle in Principle:
            assert f"- {principle.name}: {principle.takeaway}" in out

    def test_subset_keeps_canonical_order(self, capsys):
        out = _run(capsys, [Principle.DIP, Principle.OCP])
        assert "(SRP)" not in out
        assert "(LSP)" not in out
        assert out.index("(OCP)") < out.index("(DIP)")
        assert "Selected SOLID principles demonstrated successfully!" in out
        assert "- SRP:" not in out

    def test_default_container(self):
        assert isinstance(SolidDemoRunner().services, ServiceContainer)


class TestDemos:

    @pytest.fixture
    def runner(self):
        return SolidDemoRunner(ServiceContainer())

    def test_ocp(self, runner, capsys):
        runner.demo_ocp()
        out = capsys.readouterr().out
        assert "Regular customer discount: 5.00" in out
        assert "Premium customer discount: 10.00" in out
        assert "VIP customer discount: 15.00" in out
        assert "Student discount: 20.00" in out
        assert "Unknown customer discount: 0 (matched a strategy: False)" in out

    def test_ocp_registers_student_on_container_registry(self, runner, capsys):
        runner.demo_ocp()
        assert "student" in runner.services.discount_registry()

    def test_ocp_twice(self, runner, capsys):
        runner.demo_ocp()
        runner.demo_ocp()
        assert capsys.readouterr().out.count("Student discount: 20.00") == 2

    def test_srp(self, runner, capsys):
        runner.demo_srp()
        out = capsys.readouterr().out
        assert "Error: Name and email are required" in out
        assert "Saving user Jane Doe to database" in out
        assert "Error: Invalid user data" in out

    def test_lsp(self, runner, capsys):
        runner.demo_lsp()
        out = capsys.readouterr().out
        assert "Area: 20" in out
        assert "Area: 25" in out
        assert "CircleShape area: 28" in out
        assert "Total area: 64" in out

    def test_isp_reports_unsupported_operations(self, runner, capsys):
        runner.demo_isp()
        out = capsys.readouterr().out
        assert "Not supported: Humans don't deploy" in out
        assert "Not supported: Robots don't eat" in out
        assert "Developer writing code" in out

    def test_dip(self, runner, capsys):
        runner.demo_dip()
        out = capsys.readouterr().out
        assert "Saving order 1 to SQL Server" in out
        assert "Saving order 2 to MongoDB" in out
        assert "via SendGrid" in out
        assert "Console log: Order 2 processed" in out
