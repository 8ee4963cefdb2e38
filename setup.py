from setuptools import setup, find_packages

setup(
    name="xtio",
    version="0.1.0a0",
    description="Foundation I/O layer — leveled, colorized console logging and filesystem conveniences",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov>=4.0"],
    },
    entry_points={
        "console_scripts": [
            "xtio=xtio.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
