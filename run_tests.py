#!/usr/bin/env python3
"""
Main test runner for BARES.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Push a few expressions through the full pipeline."""

    print("🚀 BARES Test Suite")
    print("=" * 60)

    try:
        from bares.parser import Parser
        from bares.postfix import to_postfix
        from bares.evaluator import evaluate
        print("✅ All pipeline modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import pipeline modules: {e}")
        return False

    print("Testing simple pipeline...")
    parser = Parser()
    expected = {
        "(10 + (2+3))": 15,
        "  123 +  548": 671,
        "2+3*4": 14,
        "2^3^2": 512,
    }
    for text, value in expected.items():
        result = parser.parse(text)
        if not result.ok:
            print(f"  ❌ {text!r}: {result}")
            return False
        postfix = to_postfix(parser.get_tokens())
        evaluation = evaluate(postfix)
        if evaluation.value != value:
            print(f"  ❌ {text!r}: expected {value}, got {evaluation.message}")
            return False
        print(f"  🔧 {text!r} -> {' '.join(postfix)} -> {evaluation.value}")

    print()
    print("✅ Pipeline smoke test PASSED")
    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    print("Running unit tests...")
    print("-" * 40)

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print()
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")
    return result.wasSuccessful()


def main():
    success = run_smoke_test() and run_unit_tests()

    print("=" * 60)
    if success:
        print("🎉 All tests passed!")
        return 0
    print("❌ Some tests failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
