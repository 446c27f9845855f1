# main.py
""" Entry point for the expression evaluator.

   Usage:
       python main.py "<expression>" [value]    evaluate once
       python main.py                           prompt loop, empty line ends;
                                                asks for the variable value when
                                                the problem contains a letter

   Keep this thin: parsing and evaluation live in SimpleEvaluator.
   config.json is read here, once, and handed to the Evaluator explicitly.
"""
import sys
import logging
from decimal import MAX_PREC, Decimal, localcontext

from SimpleEvaluator import ExpressionEngine
from SimpleEvaluator import config_manager as config_manager
from SimpleEvaluator import error as E

logger = logging.getLogger(__name__)

APPROX_SIGN = "\u2248"  # "≈"
DEFAULT_DECIMAL_PLACES = 10


def setting_or_default(settings, key, check):
    """Return settings[key] if check accepts it, else the default with a warning."""
    value = settings.get(key, config_manager.DEFAULT_SETTINGS[key])
    try:
        return check(key, value)
    except ValueError as e:
        logger.warning("Ignoring setting %s: %s", key, e)
        return config_manager.DEFAULT_SETTINGS[key]


def check_precision(name, value):
    return ExpressionEngine.check_positive(name, value, MAX_PREC)


def check_decimal_places(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def build_evaluator(settings):
    precision = setting_or_default(settings, "precision", check_precision)
    max_nesting_depth = setting_or_default(settings, "max_nesting_depth", ExpressionEngine.check_positive)
    return ExpressionEngine.Evaluator(precision=precision, max_nesting_depth=max_nesting_depth)


def cleanup(ergebnis, decimal_places=DEFAULT_DECIMAL_PLACES):
    """Round a Decimal result for display.

    Integers are returned normalized (8, not 8.0); other results are rounded
    to decimal_places.
    Returns:
        (rendered_string, rounding_flag)
    """
    rounding = False

    with localcontext() as ctx:
        # Precision boost so quantize() and normalize() never drop digits
        ctx.prec = max(128, ergebnis.adjusted() + decimal_places + 2)

        if ergebnis == ergebnis.to_integral_value():
            return format(ergebnis.normalize(), "f"), rounding

        rundungs_muster = Decimal(1).scaleb(-decimal_places) if decimal_places > 0 else Decimal(1)
        gerundetes_ergebnis = ergebnis.quantize(rundungs_muster)

        if gerundetes_ergebnis != ergebnis:
            rounding = True

        return format(gerundetes_ergebnis.normalize(), "f"), rounding


def render_error(error):
    area = E.Error_Dictionary.get(error.code[:1], "Unexpected Error")
    additional_info = f"Details: {error.message}\nEquation: {error.equation}"
    return f"{area} {error.code}: {E.ERROR_MESSAGES.get(error.code, 'Unknown error')}\n{additional_info}"


def run_once(problem, variable_value=0, evaluator=None, decimal_places=DEFAULT_DECIMAL_PLACES):
    """Evaluate one problem and print the result. Returns the exit status."""
    if evaluator is None:
        evaluator = ExpressionEngine.Evaluator()

    try:
        ergebnis = evaluator.evaluate(problem, variable_value)
    except E.MathError as e:
        logger.debug("Evaluation failed with code %s", e.code)
        print(render_error(e))
        return 1

    ausgabe_string, rounding = cleanup(ergebnis, decimal_places)
    if rounding:
        print(f"{APPROX_SIGN} {ausgabe_string}")
    else:
        print(f"= {ausgabe_string}")
    return 0


def prompt_loop(evaluator=None, decimal_places=DEFAULT_DECIMAL_PLACES):
    while True:
        try:
            problem = input("Enter the problem: ")
            variable_value = 0
            if any(character.isalpha() for character in problem):
                variable_value = input("Enter the value: ") or 0
        except EOFError:
            break
        if not problem:
            break
        run_once(problem, variable_value, evaluator, decimal_places)
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    settings = config_manager.load_setting_value("all")
    logging.basicConfig(level=logging.DEBUG if settings.get("debug") else logging.WARNING)

    evaluator = build_evaluator(settings)
    decimal_places = setting_or_default(settings, "decimal_places", check_decimal_places)

    if not argv:
        return prompt_loop(evaluator, decimal_places)

    problem = argv[0]
    variable_value = argv[1] if len(argv) > 1 else 0
    return run_once(problem, variable_value, evaluator, decimal_places)


if __name__ == "__main__":
    sys.exit(main())
