"""Testing support – header builder, fakes and Hypothesis strategies.

Import the fixtures in your ``conftest.py``::

    pytest_plugins = ["hooksig.testing.fixtures"]
"""

from hooksig.testing.fakes import FAKE_NOW, FakeClock
from hooksig.testing.headers import build_signature_header

__all__ = ["FAKE_NOW", "FakeClock", "build_signature_header"]
