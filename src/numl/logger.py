"""Contains the name for the logger of numl modules.

``numl`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
The package only emits messages of level ``DEBUG``, e.g. the step size
chosen by :func:`numl.finite.central.derivative`.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``numl.logger.numl_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "numl"
numl_logger = logging.getLogger(logger_name)
