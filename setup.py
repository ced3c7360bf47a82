from setuptools import find_packages, setup

version = None
with open("fixed_size_buffer/__init__.py", encoding="utf-8") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.strip().split()[-1][1:-1]
            break
assert version is not None, "Could not find version string"

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fixed-size-buffer",
    version=version,
    description="Fixed-capacity ring buffer with overwrite-on-overflow semantics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "pyyaml>=6.0.1",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest>=6.2.5",
            "pytest-cov>=2.12.1",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "fixed-size-buffer = fixed_size_buffer.cli.app:main",
        ]
    },
    keywords="ring-buffer circular-buffer fifo data-structure",
)
