# -*- coding: utf-8 -*-
# pydoit task file
# see https://pydoit.org/
# run from this dir with `doit`, or `doit list`, `doit help` etc. (pip install doit 1st)

from doit.action import CmdAction


def _build_pytest_command(
    test_dir,
    keyword="",
    speed="",
    retry=False,
    print_logs=False,
    full_trace=False,
):
    """Helper function to build pytest commands for test tasks."""
    cmd = ["pytest"]

    if print_logs:
        cmd.append("--capture=no")
    if full_trace:
        cmd.append("--full-trace")

    cmd.extend(["--color=yes", "-vv"])

    if retry:
        cmd.append("--lf")
    if keyword:
        cmd.extend(["-k", keyword])
    if speed == "slow":
        cmd.extend(["-m", "slow"])
    elif speed in ["not slow", "fast"]:
        cmd.extend(["-m", '"not slow"'])
    elif speed not in ["", "all"]:
        raise ValueError(
            f"Invalid speed filter: {speed}. Use 'slow', 'not slow', 'fast', or 'all'"
        )

    cmd.append(test_dir)
    return " ".join(cmd)


def task_install():
    """Install orion-logger in editable mode, with test extras"""
    return {
        "actions": ['pip install -e ".[test]"'],
        "verbosity": 2,
    }


def task_test_logic():
    """Run the logic test suite (test in test/logic/)."""

    def router(keyword, speed, retry, print_logs, full_trace, help=False):
        if help:
            return """echo '
Test Logic Runner Help
====================

Filter Options:
  -k, --keyword TEXT    Only run test matching the keyword expression
                        Example: -k "device and not slow"
  -s, --speed TEXT      Filter test by speed:
                        - "slow": Run only slow test (real server sockets)
                        - "not slow" or "fast": Skip slow test
                        - "all": Run all test regardless of speed
  -r, --retry           Only run previously failed test

Output Options:
  -p, --print-logs      Print test logs to console instead of capturing
  -f, --full-trace      Show full traceback on errors

Examples:
  doit test_logic                     # Run all test
  doit test_logic -k measurement      # Run test containing "measurement"
  doit test_logic -s fast -p          # Run fast test with logs
  '"""
        try:
            return _build_pytest_command(
                "test/logic/",
                keyword=keyword,
                speed=speed,
                retry=retry,
                print_logs=print_logs,
                full_trace=full_trace,
            )
        except ValueError as e:
            return f"echo 'Error: {str(e)}' && exit 1"

    return {
        "actions": [CmdAction(router)],
        "params": [
            {"name": "help", "long": "help", "default": False, "type": bool},
            {"name": "keyword", "short": "k", "default": ""},
            {"name": "speed", "short": "s", "default": ""},
            {"name": "retry", "short": "r", "default": False, "type": bool},
            {"name": "print_logs", "short": "p", "default": False, "type": bool},
            {"name": "full_trace", "short": "f", "default": False, "type": bool},
        ],
        "verbosity": 2,
    }


def task_format():
    """Format code using ruff."""
    return {
        "actions": [
            "ruff check --select I --fix src/orion test/ dodo.py",
            "ruff format src/orion test/ dodo.py",
        ],
        "verbosity": 2,
    }
