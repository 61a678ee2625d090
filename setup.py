from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dagpath",
    version="0.1.0",
    description="SCC decomposition, topological order and DAG shortest/longest paths.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.10",
    install_requires=["networkx", "PyYAML"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["dagpath=dagpath.cli:main"]},
)
