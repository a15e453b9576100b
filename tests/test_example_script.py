import runpy

from conftest import PROJECT_ROOT


def test_example_script_runs_from_a_checkout() -> None:
    namespace = runpy.run_path(str(PROJECT_ROOT / "scripts" / "example_run.py"))

    namespace["main"]()
