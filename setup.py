"""
Setup configuration for the MINAA graph-alignment core.
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README
README = Path(__file__).parent / "README.md"
long_description = README.read_text() if README.exists() else ""

# Read requirements
REQUIREMENTS = Path(__file__).parent / "requirements.txt"
requirements = []
if REQUIREMENTS.exists():
    with open(REQUIREMENTS) as f:
        requirements = [
            line.strip() for line in f
            if line.strip() and not line.startswith('#')
        ]

setup(
    name="minaa",
    version="0.1.0",
    description="Graphlet-signature cost matrices and alignment-driven graph merging",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="MINAA Team",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.80.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="graph-alignment graphlets gdv network-alignment",
)
