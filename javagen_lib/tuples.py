"""
Tuple classes of arity 0..N and the Tuple interface with one factory method per arity.
"""
import logging
from typing import List

from .align import expand, render
from .config import GeneratorConfig
from .emitter import CLASS_HEADER, emit

logger = logging.getLogger(__name__)

TUPLE_PACKAGE = "javaslang"

# Continuation lines of the equals() conjunction, "&&" at column 22 of the generated class
EQUALS_DELIMITER = "\n" + " " * 25 + "&& "

BASE_TUPLE_TEMPLATE = """
    package javaslang;

    public interface Tuple extends ValueObject {

        /**
         * Returns the number of elements of this tuple.
         *
         * @return The number of elements.
         */
        int arity();

        // -- factory methods

        static Tuple0 empty() {
            return Tuple0.instance();
        }

        ${factory_methods}
    }
"""

FACTORY_METHOD_TEMPLATE = """
    static <${generics}> Tuple${arity}<${generics}> of(${params_decl}) {
        return new Tuple${arity}<>(${params});
    }
"""

TUPLE0_TEMPLATE = """
    package javaslang;

    import java.util.Objects;

    /**
     * Implementation of an empty tuple, a tuple containing no elements.
     */
    public final class Tuple0 implements Tuple {

        private static final long serialVersionUID = 1L;

        /**
         * The singleton instance of Tuple0.
         */
        private static final Tuple0 INSTANCE = new Tuple0();

        /**
         * Hidden constructor.
         */
        private Tuple0() {
        }

        /**
         * Returns the singleton instance of Tuple0.
         *
         * @return The singleton instance of Tuple0.
         */
        public static Tuple0 instance() {
            return INSTANCE;
        }

        @Override
        public int arity() {
            return 0;
        }

        @Override
        public Tuple0 unapply() {
            return this;
        }

        @Override
        public boolean equals(Object o) {
            return o == this;
        }

        @Override
        public int hashCode() {
            return Objects.hash();
        }

        @Override
        public String toString() {
            return "()";
        }

        // -- Serializable implementation

        /**
         * Instance control for object serialization.
         *
         * @return The singleton instance of Tuple0.
         * @see java.io.Serializable
         */
        private Object readResolve() {
            return INSTANCE;
        }
    }
"""

TUPLE_TEMPLATE = """
    package javaslang;

    import java.util.Objects;

    /**
     * Implementation of a tuple containing ${elements}.
     */
    public class Tuple${arity}<${generics}> implements Tuple {

        private static final long serialVersionUID = 1L;

        ${fields}

        public Tuple${arity}(${params_decl}) {
            ${assignments}
        }

        @Override
        public int arity() {
            return ${arity};
        }

        @Override
        public Tuple${arity}<${generics}> unapply() {
            return this;
        }

        @Override
        public boolean equals(Object o) {
            if (o == this) {
                return true;
            } else if (!(o instanceof Tuple${arity})) {
                return false;
            } else {
                final Tuple${arity} that = (Tuple${arity}) o;
                return ${equals};
            }
        }

        @Override
        public int hashCode() {
            return Objects.hash(${values});
        }

        @Override
        public String toString() {
            return String.format("(${formats})", ${values});
        }
    }
"""


def _generics(arity: int) -> str:
    return expand(1, arity, lambda j: f"T{j}", ", ")


def _params_decl(arity: int) -> str:
    return expand(1, arity, lambda j: f"T{j} t{j}", ", ")


def gen_factory_method(arity: int) -> str:
    return render(
        FACTORY_METHOD_TEMPLATE,
        arity=arity,
        generics=_generics(arity),
        params_decl=_params_decl(arity),
        params=expand(1, arity, lambda j: f"t{j}", ", "),
    )


def gen_base_tuple(max_arity: int) -> str:
    return render(BASE_TUPLE_TEMPLATE, factory_methods=expand(1, max_arity, gen_factory_method, "\n\n"))


def gen_tuple0() -> str:
    return render(TUPLE0_TEMPLATE)


def gen_tuple(arity: int) -> str:
    """Source of Tuple<arity>, a value class holding arity elements _1.._arity."""
    if arity < 1:
        raise ValueError(f"Tuple classes start at arity 1, got {arity}")

    return render(
        TUPLE_TEMPLATE,
        arity=arity,
        elements="one element" if arity == 1 else f"{arity} elements",
        generics=_generics(arity),
        params_decl=_params_decl(arity),
        fields=expand(1, arity, lambda j: f"public final T{j} _{j};", "\n"),
        assignments=expand(1, arity, lambda j: f"this._{j} = t{j};", "\n"),
        equals=expand(1, arity, lambda j: f"Objects.equals(this._{j}, that._{j})", EQUALS_DELIMITER),
        values=expand(1, arity, lambda j: f"_{j}", ", "),
        formats=expand(1, arity, lambda j: "%s", ", "),
    )


def generate_tuples(config: GeneratorConfig) -> List[str]:
    """Write Tuple.java, Tuple0.java and Tuple1..Tuple<max_arity>.java."""
    written = [
        emit(TUPLE_PACKAGE, "Tuple.java", CLASS_HEADER, gen_base_tuple(config.max_arity), config.output_dir, config.charset),
        emit(TUPLE_PACKAGE, "Tuple0.java", CLASS_HEADER, gen_tuple0(), config.output_dir, config.charset),
    ]
    for arity in range(1, config.max_arity + 1):
        written.append(
            emit(TUPLE_PACKAGE, f"Tuple{arity}.java", CLASS_HEADER, gen_tuple(arity), config.output_dir, config.charset)
        )
    logger.debug("Generated %d tuple files", len(written))
    return written
