"""
Function interfaces of arity 0..N and their common Lambda base interface.

Every arity is written four times: checked and unchecked, each under a long and
a short name (CheckedLambda/χ, Lambda/λ).
"""
import logging
from typing import List, NamedTuple

from .align import expand, render
from .config import GeneratorConfig
from .emitter import CLASS_HEADER, emit

logger = logging.getLogger(__name__)

FUNCTION_PACKAGE = "javaslang/function"


class FunctionFamily(NamedTuple):
    name: str
    checked: bool


FUNCTION_FAMILIES = (
    FunctionFamily("χ", checked=True),
    FunctionFamily("CheckedLambda", checked=True),
    FunctionFamily("λ", checked=False),
    FunctionFamily("Lambda", checked=False),
)

LAMBDA_TEMPLATE = """
package javaslang.function;

import javaslang.control.Try;

import java.io.Serializable;
import java.lang.invoke.MethodType;
import java.lang.invoke.SerializedLambda;
import java.lang.reflect.Method;
import java.util.function.Function;

/**
 * <p>
 * This is a general definition of a checked function of unknown parameters and a return value of type R.
 * A checked function may throw an exception. The exception type is not a generic type parameter because
 * when composing functions, we cannot say anything else about the resulting type of exception than that it is
 * a Throwable.
 * </p>
 * <p>
 * This class is intended to be used internally.
 * </p>
 *
 * @param <R> Return type of the checked function.
 */
public interface Lambda<R> extends Serializable {

    /**
     * Serializes a lambda and returns the corresponding {@link java.lang.invoke.SerializedLambda}.
     *
     * @param lambda A serializable lambda
     * @return The serialized lambda wrapped in a {@link javaslang.control.Try.Success}, or a {@link javaslang.control.Try.Failure}
     * if an exception occurred.
     * @see <a
     * href="http://stackoverflow.com/questions/21860875/printing-debug-info-on-errors-with-java-8-lambda-expressions">printing
     * debug info on errors with java 8 lambda expressions</a>
     * @see <a href="http://www.slideshare.net/hendersk/method-handles-in-java">Method Handles in Java</a>
     */
    static SerializedLambda getSerializedLambda(Serializable lambda) {
        return Try.of(() -> {
            final Method method = lambda.getClass().getDeclaredMethod("writeReplace");
            method.setAccessible(true);
            return (SerializedLambda) method.invoke(lambda);
        }).get();
    }

    /**
     * <p>
     * Gets the runtime method signature of the given lambda instance. Especially this function is handy when the
     * functional interface is generic and the parameter and/or return types cannot be determined directly.
     * </p>
     * <p>
     * Uses internally the {@link java.lang.invoke.SerializedLambda#getImplMethodSignature()} by parsing the JVM field
     * types of the method signature. The result is a {@link java.lang.invoke.MethodType} which contains the return type
     * and the parameter types of the given lambda.
     * </p>
     *
     * @param lambda A serializable lambda.
     * @return The signature of the lambda as {@linkplain java.lang.invoke.MethodType}.
     */
    static MethodType getLambdaSignature(Serializable lambda) {
        final String signature = getSerializedLambda(lambda).getImplMethodSignature();
        return MethodType.fromMethodDescriptorString(signature, lambda.getClass().getClassLoader());
    }

    /**
     * @return the number of function arguments.
     * @see <a href="http://en.wikipedia.org/wiki/Arity">Arity</a>
     */
    int arity();

    /**
     * Returns a curried version of this function.
     *
     * @return A curried function equivalent to this.
     */
    Lambda curried();

    /**
     * Returns a tupled version of this function.
     *
     * @return A tupled function equivalent to this.
     */
    Lambda<R> tupled();

    /**
     * Returns a reversed version of this function.
     *
     * @return A reversed function equivalent to this.
     */
    Lambda<R> reversed();

    /**
     * There can be nothing said about the type of exception (in Java), if the Function arg is also a checked function.
     * In an ideal world we could denote the appropriate bound of both exception types (this and after).
     * This is the reason why CheckedFunction throws a Throwable instead of a concrete exception.
     *
     * @param after Functions applied after this
     * @param <V> Return value of after
     * @return A Function composed of this and after
     */
    <V> Lambda<V> andThen(Function<? super R, ? extends V> after);

    default MethodType getType() {
        return Lambda.getLambdaSignature(this);
    }
}
"""

FUNCTION_TEMPLATE = """
    package javaslang.function;

    import javaslang.Tuple${arity};

    import java.util.Objects;
    import java.util.function.Function;

    @FunctionalInterface
    public interface ${name}${arity}<${generics_function}R> extends Lambda<R>${additional_interfaces} {

        ${identity}

        ${apply_override}
        R apply(${params_decl})${throws};

        ${get}

        @Override
        default int arity() {
            return ${arity};
        }

        @Override
        default ${curried_type} curried() {
            return ${curried} -> apply(${params});
        }

        @Override
        default ${name}1<Tuple${arity}${generics_tuple}, R> tupled() {
            return t -> apply(${tupled});
        }

        @Override
        default ${name}${arity}<${generics_reversed_function}R> reversed() {
            return (${params_reversed}) -> apply(${params});
        }

        @Override
        default <V> ${name}${arity}<${generics_function}V> andThen(Function<? super R, ? extends V> after) {
            Objects.requireNonNull(after);
            return (${params}) -> after.apply(apply(${params}));
        }

        ${compose}
    }
"""

IDENTITY_TEMPLATE = """
    static <T> ${name}1<T, T> identity() {
        return t -> t;
    }
"""

GET_TEMPLATE = """
    @Override
    default R get() {
        return apply();
    }
"""

COMPOSE_TEMPLATE = """
    default <V> ${name}1<V, R> compose(Function<? super V, ? extends T1> before) {
        Objects.requireNonNull(before);
        return v -> apply(before.apply(v));
    }
"""


def gen_lambda() -> str:
    return render(LAMBDA_TEMPLATE)


def _generics(arity: int) -> str:
    return expand(1, arity, lambda j: f"T{j}", ", ")


def _additional_interfaces(arity: int, checked: bool) -> str:
    # Unchecked functions of small arity double as their java.util.function counterpart
    if checked:
        return ""
    if arity == 0:
        return ", java.util.function.Supplier<R>"
    if arity == 1:
        return f", java.util.function.Function<{_generics(arity)}, R>"
    if arity == 2:
        return f", java.util.function.BiFunction<{_generics(arity)}, R>"
    return ""


def curried_type(name: str, arity: int) -> str:
    """
    The type of the curried form: a chain of one-argument functions.

    Arity 0 curries to a function of Void, arity 3 to name1<T1, name1<T2, name1<T3, R>>>.
    """
    if arity == 0:
        return f"{name}1<Void, R>"
    result = "R"
    for j in range(arity, 0, -1):
        result = f"{name}1<T{j}, {result}>"
    return result


def gen_function(name: str, arity: int, checked: bool) -> str:
    """Source of the functional interface name<arity> taking arity parameters."""
    generics = _generics(arity)
    generics_reversed = ", ".join(f"T{j}" for j in range(arity, 0, -1))

    return render(
        FUNCTION_TEMPLATE,
        name=name,
        arity=arity,
        generics_function=f"{generics}, " if arity > 0 else "",
        generics_reversed_function=f"{generics_reversed}, " if arity > 0 else "",
        generics_tuple=f"<{generics}>" if arity > 0 else "",
        additional_interfaces=_additional_interfaces(arity, checked),
        identity=render(IDENTITY_TEMPLATE, name=name) if arity == 1 else "",
        apply_override="@Override" if arity in (1, 2) and not checked else "",
        params_decl=expand(1, arity, lambda j: f"T{j} t{j}", ", "),
        throws=" throws Throwable" if checked else "",
        get=render(GET_TEMPLATE) if arity == 0 and not checked else "",
        curried_type=curried_type(name, arity),
        curried="v" if arity == 0 else expand(1, arity, lambda j: f"t{j}", " -> "),
        params=expand(1, arity, lambda j: f"t{j}", ", "),
        params_reversed=", ".join(f"t{j}" for j in range(arity, 0, -1)),
        tupled=expand(1, arity, lambda j: f"t._{j}", ", "),
        compose=render(COMPOSE_TEMPLATE, name=name) if arity == 1 else "",
    )


def generate_functions(config: GeneratorConfig) -> List[str]:
    """Write Lambda.java and every function family for arities 0..max_arity."""
    written = [
        emit(FUNCTION_PACKAGE, "Lambda.java", CLASS_HEADER, gen_lambda(), config.output_dir, config.charset)
    ]
    for arity in range(0, config.max_arity + 1):
        for family in FUNCTION_FAMILIES:
            body = gen_function(family.name, arity, family.checked)
            written.append(
                emit(FUNCTION_PACKAGE, f"{family.name}{arity}.java", CLASS_HEADER, body, config.output_dir, config.charset)
            )
    logger.debug("Generated %d function files", len(written))
    return written
