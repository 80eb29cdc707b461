"""
SolidDemoRunner — prints every SOLID demonstration in order.

Each `demo_*` method follows the same shape:
  1. Heading, the problem, the solution.
  2. The BAD example: build the violating classes and call them.
  3. The GOOD example: build the conforming classes and call them.

The runner gets its services from a `ServiceContainer` (the composition
root) instead of constructing them itself. Pass a container in to control
wiring; by default the runner builds its own.
"""

import logging
from typing import Callable, Iterable

from solid_examples.domain.discounts import BadDiscountCalculator, StudentDiscount
from solid_examples.domain.models import Order, Principle, User
from solid_examples.domain.shapes import (
    BadAreaCalculator,
    CircleShape,
    Rectangle,
    RectangleShape,
    Shape,
    ShapeCalculator,
    Square,
    SquareShape,
)
from solid_examples.domain.workers import (
    CodeManager,
    Developer,
    GoodHumanWorker,
    GoodRobotWorker,
    HumanResourceManager,
    HumanWorker,
    RobotWorker,
    WorkManager,
)
from solid_examples.services.factory import ServiceContainer
from solid_examples.services.orders import BadOrderProcessor
from solid_examples.services.users import BadUserManager

logger = logging.getLogger(__name__)

_ICONS = {
    Principle.SRP: "📋",
    Principle.OCP: "🔓",
    Principle.LSP: "🔄",
    Principle.ISP: "🎯",
    Principle.DIP: "🔄",
}


def _heading(principle: Principle, problem: str, solution: str) -> None:
    title = f"{_ICONS[principle]} {principle.display_name.upper()} ({principle.name})"
    print(title)
    print("-" * len(title))
    print(f"Problem: {problem}")
    print(f"Solution: {solution}\n")


class SolidDemoRunner:
    def __init__(self, services: ServiceContainer | None = None) -> None:
        self.services = services or ServiceContainer()

    @property
    def demos(self) -> dict[Principle, Callable[[], None]]:
        return {
            Principle.SRP: self.demo_srp,
            Principle.OCP: self.demo_ocp,
            Principle.LSP: self.demo_lsp,
            Principle.ISP: self.demo_isp,
            Principle.DIP: self.demo_dip,
        }

    def run(self, principles: Iterable[Principle] | None = None) -> None:
        """Run the selected demos (all by default) in S-O-L-I-D order."""
        selected = set(principles) if principles is not None else set(Principle)

        print("🚀 SOLID PRINCIPLES DEMONSTRATION")
        print("================================\n")

        for principle, demo in self.demos.items():
            if principle not in selected:
                continue
            logger.info("Running %s demo", principle.name)
            demo()
            print()

        scope = "All" if selected == set(Principle) else "Selected"
        print(f"✅ {scope} SOLID principles demonstrated successfully!")
        print("\n📚 KEY TAKEAWAYS:")
        for principle in Principle:
            if principle in selected:
                print(f"- {principle.name}: {principle.takeaway}")

    # ── SRP ──────────────────────────────────────────────────────

    def demo_srp(self) -> None:
        _heading(
            Principle.SRP,
            "Classes with multiple responsibilities are hard to maintain",
            "Split classes so each has only one responsibility",
        )

        print("❌ Bad Example (Multiple responsibilities):")
        print("- BadUserManager handles validation, persistence, email, and logging")
        print("- This makes it hard to test, maintain, and reuse")
        bad_manager = BadUserManager()
        bad_manager.create_user("John Doe", "john@example.com")
        print("- Blank input blows up inside the same method that also sends email:")
        try:
            bad_manager.create_user("", "")
        except ValueError as exc:
            print(f"Error: {exc}")

        print("\n✅ Good Example (Single responsibilities):")
        print("- UserValidator: Only validates user data")
        print("- UserRepository: Only handles data persistence")
        print("- EmailService: Only sends emails")
        print("- AuditLog: Only handles logging")
        print("- UserManager: Only orchestrates the process")
        manager = self.services.user_manager()
        manager.create_user(User(name="Jane Doe", email="jane@example.com"))
        print("- Invalid data is rejected before anything is saved or sent:")
        try:
            manager.create_user(User(name="No Email"))
        except ValueError as exc:
            print(f"Error: {exc}")

    # ── OCP ──────────────────────────────────────────────────────

    def demo_ocp(self) -> None:
        _heading(
            Principle.OCP,
            "Adding new functionality requires modifying existing code",
            "Use abstraction to allow extension without modification",
        )

        print("❌ Bad Example (Need to modify existing code):")
        print("- BadDiscountCalculator requires modification to add new customer types")
        print("- This violates OCP and can break existing functionality")
        bad_calculator = BadDiscountCalculator()
        print(f"Regular customer discount: {bad_calculator.calculate_discount('regular', 100)}")
        print(f"Premium customer discount: {bad_calculator.calculate_discount('premium', 100)}")

        print("\n✅ Good Example (Open for extension):")
        print("- StrategyRegistry maps each customer category to a discount strategy")
        print("- New discount types can be added without modifying existing code")
        print("- Each strategy class has a single responsibility")
        registry = self.services.discount_registry()
        print(f"Regular customer discount: {registry.compute_discount('regular', 100)}")
        print(f"Premium customer discount: {registry.compute_discount('premium', 100)}")
        print(f"VIP customer discount: {registry.compute_discount('VIP', 100)}")

        print("\n🆕 Adding new discount strategy without modifying existing code:")
        print("- StudentDiscount is registered at runtime")
        print("- No existing code was modified")
        registry.register("student", StudentDiscount())
        print(f"Student discount: {registry.compute_discount('student', 100)}")

        print("\n❓ Unknown categories fall back to no discount:")
        quote = registry.quote("unknown", 100)
        print(f"Unknown customer discount: {quote.discount} (matched a strategy: {quote.matched})")

    # ── LSP ──────────────────────────────────────────────────────

    def demo_lsp(self) -> None:
        _heading(
            Principle.LSP,
            "Subtypes that violate the contract of their base types",
            "Ensure subtypes can be used anywhere their base type is expected",
        )

        print("❌ Bad Example (LSP violation):")
        print("- Square inherits from Rectangle but changes behavior")
        print("- Setting width also changes height, violating Rectangle's contract")
        print("Rectangle resized to 4x5 (expected area 20):")
        BadAreaCalculator.area_after_resize(Rectangle())
        print("Square resized to 4x5 (expected area 20):")
        BadAreaCalculator.area_after_resize(Square())

        print("\n✅ Good Example (LSP compliance):")
        print("- All shapes satisfy the Shape protocol")
        print("- Each shape has its own independent properties")
        print("- All shapes can be substituted for each other")
        shapes: list[Shape] = [
            RectangleShape(width=4, height=5),
            SquareShape(side=4),
            CircleShape(radius=3),
        ]
        for shape in shapes:
            print(f"{type(shape).__name__} area: {shape.get_area()}")
        print(f"Total area: {ShapeCalculator.calculate_total_area(shapes)}")

    # ── ISP ──────────────────────────────────────────────────────

    def demo_isp(self) -> None:
        _heading(
            Principle.ISP,
            "Fat interfaces force clients to implement unused methods",
            "Create smaller, focused interfaces that clients actually need",
        )

        print("❌ Bad Example (Fat interface):")
        print("- Worker interface has too many methods")
        print("- HumanWorker and RobotWorker must implement methods they can't use")
        human_worker = HumanWorker()
        robot_worker = RobotWorker()

        print("Human worker methods:")
        human_worker.work()
        human_worker.eat()
        human_worker.sleep()
        try:
            human_worker.deploy()
        except NotImplementedError as exc:
            print(f"Not supported: {exc}")

        print("\nRobot worker methods:")
        robot_worker.write_code()
        robot_worker.design_architecture()
        robot_worker.test_code()
        try:
            robot_worker.eat()
        except NotImplementedError as exc:
            print(f"Not supported: {exc}")

        print("\n✅ Good Example (Segregated interfaces):")
        print("- Each interface has a single, focused responsibility")
        print("- Clients only implement interfaces they actually need")
        print("- No NotImplementedError raised")
        good_human = GoodHumanWorker()
        good_robot = GoodRobotWorker()
        developer = Developer()

        print("Good human worker:")
        good_human.work()
        good_human.eat()
        good_human.sleep()

        print("\nGood robot worker:")
        good_robot.work()
        good_robot.write_code()
        good_robot.deploy()

        print("\nDeveloper (implements relevant interfaces):")
        developer.work()
        developer.write_code()
        developer.get_paid()

        print("\nManagers depend only on the capability they use:")
        work_manager = WorkManager()
        for worker in (good_human, good_robot, developer):
            work_manager.manage_work(worker)
        CodeManager().manage_code(developer)
        HumanResourceManager().manage_human(developer, developer, developer)

    # ── DIP ──────────────────────────────────────────────────────

    def demo_dip(self) -> None:
        _heading(
            Principle.DIP,
            "High-level modules depend directly on low-level modules",
            "Both should depend on abstractions (interfaces)",
        )

        print("❌ Bad Example (High-level depends on low-level):")
        print("- BadOrderProcessor directly depends on concrete implementations")
        print("- Tight coupling makes it hard to test and change")
        order = Order(id=1, customer_email="customer@example.com")
        BadOrderProcessor().process_order(order)

        print("\n✅ Good Example (Both depend on abstractions):")
        print("- OrderProcessor depends on protocols")
        print("- Dependencies are injected via constructor")
        print("- Easy to test with fakes and swap implementations")
        self.services.sql_server_order_processor().process_order(order)

        print("\n🔄 Swapping implementations:")
        print("- Same high-level module works with different implementations")
        print("- No code changes needed in OrderProcessor")
        other_order = Order(id=2, customer_email="test@example.com")
        print("Testing with SQL Server:")
        self.services.sql_server_order_processor().process_order(other_order)
        print("\nTesting with MongoDB:")
        self.services.mongo_order_processor().process_order(other_order)
