import logging
from typing import List, Optional

from .config import GeneratorConfig
from .functions import generate_functions
from .tuples import generate_tuples

logger = logging.getLogger(__name__)


def run(config: Optional[GeneratorConfig] = None) -> List[str]:
    """
    Generate every function interface and tuple class for arities 0..max_arity.

    Files are written one at a time into config.output_dir; the first error aborts
    the run and propagates. Returns the written paths in generation order.
    """
    config = config or GeneratorConfig()
    logger.info(
        "Generating arities 0..%d into %s (%s)", config.max_arity, config.output_dir, config.charset
    )

    written = generate_functions(config)
    written.extend(generate_tuples(config))

    logger.info("Wrote %d files", len(written))
    return written
