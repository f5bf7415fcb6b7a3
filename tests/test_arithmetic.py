import pytest

from tulip.errors import (
    TulipOverflowError,
    TulipTooFewArguments,
    TulipTooManyArguments,
    TulipTypeError,
    TulipZeroDivisionError,
)


@pytest.mark.parametrize(
    "source,expected,expected_type",
    [
        ("(+ 1 2)", 3, int),
        ("(+ 1 2.5)", 3.5, float),
        ("(+ 2.5 1)", 3.5, float),
        ("(+ 1.5 2.5)", 4.0, float),
        ("(+ 1 2 3 4)", 10, int),
        ("(+)", 0, int),
        ("(+ 5)", 5, int),
        ("(*)", 1, int),
        ("(* 2 3 4)", 24, int),
        ("(* 2 0.5)", 1.0, float),
        ("(- 10 4)", 6, int),
        ("(- 1 3)", -2, int),
        ("(- 1 0.5)", 0.5, float),
        ("(/ 12 3)", 4, int),
        ("(/ 7 2)", 3, int),
        ("(/ (- 0 7) 2)", -3, int),
        ("(/ 7 (- 0 2))", -3, int),
        ("(/ 7.0 2)", 3.5, float),
        ("(/ 7 2.0)", 3.5, float),
        ("(+ 1 (* 2 (+ 3 4)))", 15, int),
    ]
)
def test_arithmetic_and_promotion(run, source, expected, expected_type):
    result = run(source)
    assert result == expected
    assert type(result) is expected_type


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 1.5 0)", "(/ 1 0.0)", "(/ 1 (- 2 2))"])
def test_division_by_zero(run, source):
    with pytest.raises(TulipZeroDivisionError):
        run(source)


@pytest.mark.parametrize(
    "source",
    ['(+ 1 "a")', '(+ "a")', "(* 2 'x)", '(- "a" 1)', "(/ nil 1)", "(+ 1 '(1))"],
)
def test_non_numeric_operands(run, source):
    with pytest.raises(TulipTypeError):
        run(source)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(- 1)", TulipTooFewArguments),
        ("(- 1 2 3)", TulipTooManyArguments),
        ("(/ 1)", TulipTooFewArguments),
        ("(/ 1 2 3)", TulipTooManyArguments),
    ]
)
def test_binary_operator_arity(run, source, error):
    with pytest.raises(error):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(== 1 1)", 1),
        ("(== 1 1.0)", 1),
        ("(== 1 2)", 0),
        ('(== "a" "a")', 1),
        ('(== "a" "b")', 0),
        ("(== nil nil)", 1),
        ("(== nil 0)", 0),
        ('(== "" nil)', 0),
        ("(!= 1 2)", 1),
        ("(!= 2.0 2)", 0),
        ("(!= nil nil)", 0),
        ('(!= "a" "b")', 1),
        ("(< 1 2)", 1),
        ("(< 2 1)", 0),
        ("(> 2.5 2)", 1),
        ("(<= 2 2.0)", 1),
        ("(>= 1 2)", 0),
    ]
)
def test_comparisons(run, source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize(
    "source",
    ['(== 1 "1")', '(!= "a" 1)', "(== 'a 'a)", "(== '(1) '(1))", '(< "a" "b")', "(> nil 1)"],
)
def test_comparison_type_mismatch(run, source):
    with pytest.raises(TulipTypeError):
        run(source)


def test_comparison_arity(run):
    with pytest.raises(TulipTooFewArguments):
        run("(== 1)")
    with pytest.raises(TulipTooManyArguments):
        run("(< 1 2 3)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(abs (- 0 3))", 3),
        ("(abs (- 0 2.5))", 2.5),
        ("(odd? 3)", 1),
        ("(odd? 4)", 0),
        ("(odd? 3.7)", 1),
        ("(even? 10)", 1),
        ("(even? 2.9)", 1),
        ("(even? (- 0 3))", 0),
    ]
)
def test_number_helpers(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        '(abs "x")',
        "(odd? nil)",
        "(even? '(2))",
        "(odd? (* 1" + "0" * 300 + ".0 1" + "0" * 300 + ".0))",
        "(even? (- (* 1" + "0" * 300 + ".0 1" + "0" * 300 + ".0) (* 1" + "0" * 300 + ".0 1" + "0" * 300 + ".0)))",
    ]
)
def test_number_helpers_reject_non_numbers(run, source):
    with pytest.raises(TulipTypeError):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 9223372036854775807 1)",
        "(- (- 0 9223372036854775807) 2)",
        "(* 4294967296 4294967296)",
        "(/ (- (- 0 9223372036854775807) 1) (- 0 1))",
        "(abs (- (- 0 9223372036854775807) 1))",
        "(fold (range 1000) (lambda (a b) (* a 100000)) 1)",
    ]
)
def test_integer_overflow(run, source):
    with pytest.raises(TulipOverflowError):
        run(source)


def test_integer_range_limits(run):
    assert run("(+ 9223372036854775806 1)") == 9223372036854775807
    assert run("(- (- 0 9223372036854775807) 1)") == -9223372036854775808
    assert run("(+ 9223372036854775807 0.5)") == pytest.approx(9.223372036854776e18)
