import pytest
import evenset as es
import warnings
import logging
from typing import Optional

logger = logging.getLogger(__name__)

def _parse_solver_option(solver_option: Optional[str], filter_not_installed: bool = True) -> Optional[list]:
    """
    Parse the --solver option into a list of solvers.
    Returns 'None' if no solver was specified, otherwise returns a list of solver names.
    Supports the special "all" keyword to expand to all installed solvers.

    Arguments:
        solver_option (str): The solver option string from command line
        filter_not_installed (bool): If True, filter out non-installed solvers from the result

    Returns:
        list[str] | None:
            A list of solver names, or 'None' if no solver was specified
            If 'filter_not_installed' is True, the list will only contain installed solvers
    """
    if solver_option is None:
        return None

    # Split by comma and strip whitespace
    solvers = [s.strip() for s in solver_option.split(",") if s.strip()]
    if not solvers: # no solver specified
        warnings.warn('--solver option set, but no solver specified. Using default solver (dp).')
        return None

    if "all" in solvers:
        return es.SolverLookup.supported()

    if filter_not_installed:
        solvers = [s for s in solvers if s in es.SolverLookup.supported()]
    return solvers

def pytest_addoption(parser):
    """
    Adds cli arguments to the pytest command
    """
    parser.addoption(
        "--solver", type=str, action="store", default=None, help="Run the solver-parametrized tests on these solvers. Can be a single solver, a comma-separated list (e.g., 'dp,ortools') or 'all' to use all installed solvers."
    )

@pytest.fixture
def solver(request):
    """
    Limit tests to specific solvers.

    By providing the cli argument `--solver=<SOLVER_NAME>`, `--solver=<SOLVER1,SOLVER2,...>` or `--solver=all`,
    tests using this fixture run against all specified solvers (instead of just the default dp solver).
    """
    if hasattr(request, "param"):
        solver_value = request.param
    else:
        parsed_solvers = _parse_solver_option(request.config.getoption("--solver"))
        solver_value = parsed_solvers[0] if parsed_solvers else None

    # Set solver value on class if available (for tests using self.solver)
    if hasattr(request, "cls") and request.cls:
        request.cls.solver = solver_value

    return solver_value

def pytest_configure(config):
    # Configure logging for test filtering information
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    # Register custom marker for pytest test collecting
    config.addinivalue_line(
        "markers",
        "requires_solver(name): mark test as requiring a specific solver", # to filter tests when required solver is not installed
    )

    solver_option = config.getoption("--solver")
    if solver_option:
        requested = _parse_solver_option(solver_option, filter_not_installed=False)
        if requested:
            not_installed = sorted(set(requested) - set(es.SolverLookup.supported()))
            if not_installed:
                warnings.warn(
                    f"The following solvers are not installed and will not be tested: {', '.join(not_installed)}.",
                    UserWarning,
                    stacklevel=2
                )
            logger.info(f"Using solvers: {', '.join(requested)}")

def pytest_generate_tests(metafunc):
    """
    Parametrize tests that use the 'solver' fixture with all solvers given on the command line.
    """
    if "solver" not in metafunc.fixturenames:
        return
    if metafunc.definition.get_closest_marker("requires_solver"):
        return

    parsed_solvers = _parse_solver_option(metafunc.config.getoption("--solver"))
    if parsed_solvers is not None and len(parsed_solvers) > 1:
        metafunc.parametrize("solver", parsed_solvers)

def pytest_collection_modifyitems(config, items):
    """
    Skip tests that require a solver which is not installed on this system.
    """
    installed = {name: slv.supported() for name, slv in es.SolverLookup.base_solvers()}
    for item in items:
        marker = item.get_closest_marker("requires_solver")
        if marker and not all(installed.get(name, False) for name in marker.args):
            item.add_marker(pytest.mark.skip(reason=f"Solver {marker.args} not installed"))
