"""
Tests for the function interface generator.

Arity in → Java source out; generate_functions writes into tmp_path.
"""

from pathlib import Path

import pytest

from javagen_lib import GeneratorConfig
from javagen_lib.emitter import CLASS_HEADER
from javagen_lib.functions import (
    FUNCTION_FAMILIES,
    curried_type,
    gen_function,
    gen_lambda,
    generate_functions,
)


# ═══════════════════════════════════════════════════════════════════
#  curried_type
# ═══════════════════════════════════════════════════════════════════


class TestCurriedType:
    def test_arity_0(self):
        assert curried_type("λ", 0) == "λ1<Void, R>"

    def test_arity_1(self):
        assert curried_type("Lambda", 1) == "Lambda1<T1, R>"

    def test_arity_3(self):
        assert curried_type("F", 3) == "F1<T1, F1<T2, F1<T3, R>>>"


# ═══════════════════════════════════════════════════════════════════
#  gen_lambda / gen_function
# ═══════════════════════════════════════════════════════════════════


class TestGenLambda:
    def test_base_interface(self):
        src = gen_lambda()
        assert src.startswith("package javaslang.function;")
        assert "public interface Lambda<R> extends Serializable {" in src
        assert "    int arity();" in src
        assert "Method Handles in Java</a>\n     */\n    static SerializedLambda getSerializedLambda(" in src
        assert "printing-debug-info-on-errors-with-java-8-lambda-expressions" in src
        assert src.endswith("}")


class TestGenFunction:
    def test_unchecked_arity_2(self):
        src = gen_function("Lambda", 2, checked=False)
        assert src.startswith("package javaslang.function;\n\nimport javaslang.Tuple2;")
        assert (
            "public interface Lambda2<T1, T2, R> extends Lambda<R>, "
            "java.util.function.BiFunction<T1, T2, R> {"
        ) in src
        assert "    @Override\n    R apply(T1 t1, T2 t2);" in src
        assert "default Lambda1<T1, Lambda1<T2, R>> curried() {" in src
        assert "return t1 -> t2 -> apply(t1, t2);" in src
        assert "default Lambda1<Tuple2<T1, T2>, R> tupled() {" in src
        assert "return t -> apply(t._1, t._2);" in src
        assert "default Lambda2<T2, T1, R> reversed() {" in src
        assert "return (t2, t1) -> apply(t1, t2);" in src
        assert "default <V> Lambda2<T1, T2, V> andThen(" in src
        assert "return (t1, t2) -> after.apply(apply(t1, t2));" in src
        assert "identity()" not in src
        assert "compose(" not in src

    def test_checked_arity_2(self):
        src = gen_function("CheckedLambda", 2, checked=True)
        assert "public interface CheckedLambda2<T1, T2, R> extends Lambda<R> {" in src
        assert "{\n\n    R apply(T1 t1, T2 t2) throws Throwable;" in src
        assert "@Override\n    R apply" not in src

    def test_unchecked_arity_0_is_a_supplier(self):
        src = gen_function("λ", 0, checked=False)
        assert "public interface λ0<R> extends Lambda<R>, java.util.function.Supplier<R> {" in src
        assert "    R apply();" in src
        assert "    @Override\n    default R get() {\n        return apply();\n    }" in src
        assert "default λ1<Void, R> curried() {" in src
        assert "return v -> apply();" in src
        assert "default λ1<Tuple0, R> tupled() {" in src
        assert "default λ0<R> reversed() {" in src

    def test_checked_arity_0_has_no_get(self):
        src = gen_function("χ", 0, checked=True)
        assert "public interface χ0<R> extends Lambda<R> {" in src
        assert "get()" not in src

    def test_arity_1_identity_and_compose(self):
        src = gen_function("Lambda", 1, checked=False)
        assert "java.util.function.Function<T1, R> {" in src
        assert "    static <T> Lambda1<T, T> identity() {\n        return t -> t;\n    }" in src
        assert (
            "    default <V> Lambda1<V, R> compose(Function<? super V, ? extends T1> before) {\n"
            "        Objects.requireNonNull(before);\n"
            "        return v -> apply(before.apply(v));\n"
            "    }"
        ) in src

    def test_large_arity_has_no_java_util_interface(self):
        src = gen_function("Lambda", 5, checked=False)
        assert "public interface Lambda5<T1, T2, T3, T4, T5, R> extends Lambda<R> {" in src

    @pytest.mark.parametrize("arity", [0, 1, 2, 3, 13])
    @pytest.mark.parametrize("family", FUNCTION_FAMILIES)
    def test_well_formed(self, family, arity):
        src = gen_function(family.name, arity, family.checked)
        assert "${" not in src
        assert "\n\n\n" not in src
        assert src.count("{") == src.count("}")
        assert src.endswith("\n}")


# ═══════════════════════════════════════════════════════════════════
#  generate_functions
# ═══════════════════════════════════════════════════════════════════


class TestGenerateFunctions:
    def test_files(self, output_dir: Path, small_config: GeneratorConfig):
        written = generate_functions(small_config)
        # Lambda.java plus four families for arities 0..2
        assert len(written) == 1 + 4 * 3
        pkg = output_dir / "javaslang" / "function"
        for name in ("Lambda.java", "λ0.java", "χ1.java", "CheckedLambda2.java", "Lambda2.java"):
            assert (pkg / name).is_file()
        assert not (pkg / "Lambda3.java").exists()

    def test_file_content(self, output_dir: Path, small_config: GeneratorConfig):
        generate_functions(small_config)
        content = (output_dir / "javaslang" / "function" / "λ2.java").read_text(encoding="utf-8")
        assert content == CLASS_HEADER + "\n" + gen_function("λ", 2, checked=False)
