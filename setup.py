from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="routegraph",
    version="0.1.0",
    description="Directed graphs with DFS, BFS, Dijkstra and A* path searches.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
)
