"""katadojo: a collection of test-driven development katas.

Each kata is a small, self-contained exercise with its own pytest suite:
FizzBuzz, a string calculator, rock paper scissors, an age calculator, a
greeter, and an expense report generator with plain text, HTML and JSON
output.

Usage:
    python -m katadojo list                   # Show katas
    python -m katadojo report --format html   # Sample expense report
"""
