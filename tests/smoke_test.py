#!/usr/bin/env python3
"""Smoke test to verify basic package functionality across Python versions."""

import asyncio
import sys


def test_imports():
    """Test that all main package imports work."""
    print("Testing imports...")

    # Main package import
    import uniplan

    # Verify version exists
    assert hasattr(uniplan, "__version__")
    print(f"  ✓ Package version: {uniplan.__version__}")

    # Test all public imports
    from uniplan import (
        ActionType,
        AutoSaver,
        Course,
        Degree,
        HTTPClient,
        InMemoryRemoteStore,
        NoteScope,
        Planner,
        RestRemoteStore,
        Season,
        Semester,
        SyncReconciler,
        Weekday,
        setup_logging,
    )

    print("  ✓ All public imports successful")

    # Test exception imports
    from uniplan.exceptions import (
        NotFoundError,
        ParseError,
        SyncError,
        SyncInProgressError,
        UniplanError,
        ValidationError,
    )

    assert issubclass(SyncInProgressError, SyncError)
    print("  ✓ Exception imports successful")

    return True


def test_enums():
    """Test that enums are properly defined and accessible."""
    print("\nTesting enums...")

    from uniplan import NoteScope, Season, Weekday

    # Season order drives chronological layout
    assert Season.AUTUMN.order < Season.SPRING.order < Season.SUMMER.order
    assert Season.from_label("Spring") is Season.SPRING
    print("  ✓ Season enum works")

    assert Weekday.MONDAY.index == 0
    assert Weekday.SUNDAY.index == 6
    print("  ✓ Weekday enum works")

    assert NoteScope("course") is NoteScope.COURSE
    print("  ✓ NoteScope enum works")

    return True


def test_planner():
    """Test the basic planning flow."""
    print("\nTesting planner...")

    from uniplan import Planner

    planner = Planner()
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    planner.add_course(semester_id, {"name": "Calculus I", "credits": 4, "grade": 3.5})
    planner.add_course(semester_id, {"name": "Physics I", "credits": 4, "grade": 4.0})
    assert abs(planner.cumulative_gpa() - 3.75) < 1e-9
    print("  ✓ GPA computed")

    assert planner.undo()
    assert abs(planner.cumulative_gpa() - 3.5) < 1e-9
    assert planner.redo()
    print("  ✓ Undo/redo works")

    result = planner.add_course(semester_id, {"name": "Bad", "credits": 10})
    assert not result.success
    print("  ✓ Invalid input rejected")

    return True


def test_export_import():
    """Test that a plan survives an export/import round trip."""
    print("\nTesting export/import...")

    from uniplan import Planner

    planner = Planner()
    semester_id = planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"}).value
    planner.add_course(semester_id, {"name": "Algorithms", "credits": 6})

    other = Planner()
    assert other.import_data(planner.export_data()).success
    assert other.plan.semesters == planner.plan.semesters
    print("  ✓ Round trip works")

    return True


def test_http_client():
    """Test HTTPClient can be instantiated."""
    print("\nTesting HTTPClient...")

    from uniplan import HTTPClient

    # Create client (but don't make actual requests)
    client = HTTPClient("https://example.test/rest/v1")
    assert client is not None
    print("  ✓ HTTPClient created")

    return True


def test_sync():
    """Test push and pull against the in-memory store."""
    print("\nTesting sync...")

    from uniplan import InMemoryRemoteStore, Planner, SyncReconciler

    remote = InMemoryRemoteStore()
    planner = Planner(sync=SyncReconciler(remote, lambda: "smoke-user"))
    planner.add_semester({"name": "Fall 2024", "year": 2024, "season": "Autumn"})

    report = asyncio.run(planner.sync_to_remote())
    assert report.upserted_semesters == 1
    print("  ✓ Push works")

    other = Planner(sync=SyncReconciler(remote, lambda: "smoke-user"))
    asyncio.run(other.sync_from_remote())
    assert other.plan.semester_ids == planner.plan.semester_ids
    print("  ✓ Pull works")

    return True


def main():
    """Run all smoke tests."""
    print("=" * 60)
    print("UniPlan Smoke Test")
    print("=" * 60)
    print(f"Python version: {sys.version}")
    print(f"Platform: {sys.platform}")
    print("=" * 60)

    tests = [
        test_imports,
        test_enums,
        test_planner,
        test_export_import,
        test_http_client,
        test_sync,
    ]

    failed = []

    for test in tests:
        try:
            if not test():
                failed.append(test.__name__)
        except Exception as e:
            print(f"  ✗ {test.__name__} failed: {e}")
            failed.append(test.__name__)

    print("\n" + "=" * 60)
    if failed:
        print(f"FAILED: {len(failed)} test(s) failed:")
        for name in failed:
            print(f"  - {name}")
        sys.exit(1)
    else:
        print("SUCCESS: All smoke tests passed!")
        sys.exit(0)


if __name__ == "__main__":
    main()
