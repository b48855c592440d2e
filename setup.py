import re
from pathlib import Path
from typing import List

from setuptools import find_packages, setup

root = Path(__file__).parent


def read_src_version():
    p = root / "src" / "sna" / "__init__.py"
    src = p.read_text()
    m = re.search(r'^__version__\s*=\s*"([^"]+)"', src, re.M)
    assert m is not None
    return m.group(1)


install_requires = [
    "attrs>=21.3.0",
]

build_requires = [
    "wheel>=0.38.4",
    "twine>=4.0.1",
]

test_requires = [
    "pytest~=7.2",
    "pytest-cov>=4.0",
]

dev_requires: List[str] = [
    # 'pytest-sugar',
    "pre-commit",
]

lint_requires = [
    "black~=23.9.1",
    "ruff>=0.0.287",
    "ruff-lsp",
]

typecheck_requires = [
    "mypy~=1.5.1",
]

setup(
    name="sna",
    version=read_src_version(),
    description="RFC 1982 Serial Number Arithmetic",
    long_description="\n\n".join(
        [(root / "README.md").read_text(), (root / "CHANGES.md").read_text()]
    ),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Internet :: Name Service (DNS)",
    ],
    package_dir={
        "": "src",
    },
    packages=find_packages("src"),
    package_data={
        "sna": ["py.typed"],
    },
    include_package_data=True,
    python_requires=">=3.11",
    setup_requires=["setuptools>=61.0"],
    install_requires=install_requires,
    extras_require={
        "build": build_requires,
        "test": test_requires,
        "dev": dev_requires,
        "lint": lint_requires,
        "typecheck": typecheck_requires,
    },
)
