#!/usr/bin/env python3
"""
Main test runner for the ArithLang front end.

Runs a quick pipeline smoke check, then the unit test suite under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_check() -> bool:
    """Tokenize, parse and print one program end to end."""

    print("🚀 ArithLang Front End Test Suite")
    print("=" * 60)

    try:
        from arithlang.lexer import Lexer, LexError
        from arithlang.parser import Parser, ParseError, to_source, format_tree
        print("✅ All front end modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import front end modules: {e}")
        return False

    print("Testing simple parsing pipeline...")
    code = "(a + 2) * 3 - b % 4"

    try:
        print("  🔧 Lexing...")
        tokens = Lexer(code).tokenize()
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Parsing...")
        program = Parser().parse_program(code)
        print(f"     Generated AST with {len(program.body)} statements")

        print("  🔧 Printing...")
        rendered = to_source(program)
        if Parser().parse_program(rendered) != program:
            print(f"     ❌ Re-parsing {rendered!r} produced a different tree")
            return False
        print(f"     ✅ Canonical form: {rendered}")

    except (LexError, ParseError) as e:
        print(f"❌ Pipeline check FAILED: {e}")
        return False

    print()
    print(format_tree(program))
    print()

    print("  ❌ Testing error handling...")
    for bad_code in ["(1 + 2", "1 $ 2", "let x = 1"]:
        try:
            Parser().parse_program(bad_code)
        except (LexError, ParseError) as e:
            print(f"     ✅ {bad_code!r} rejected: {e.diagnostic.message}")
        else:
            print(f"     ❌ {bad_code!r} was accepted")
            return False

    print()
    return True


def run_unit_tests() -> bool:
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_pipeline_check() and run_unit_tests()
    print("🎉 All tests PASSED!" if success else "❌ Some tests FAILED")
    sys.exit(0 if success else 1)
