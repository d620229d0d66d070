import re
from pathlib import Path

from setuptools import find_packages, setup

_ABOUT = Path(__file__).parent / "src" / "picokey" / "__about__.py"
_VERSION = re.search(r'__version__ = "([^"]+)"', _ABOUT.read_text()).group(1)

if __name__ == "__main__":
    setup(
        name="picokey",
        version=_VERSION,
        description="Picokey multi-curve public keys: validate, compress, verify, recover",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        extras_require={"test": ["pytest"]},
    )
