from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="condmatch",
    version="0.3.0",
    author="Andrey Golovanov",
    description="Targeting condition matchers with semantic version comparison.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["condmatch = condmatch.cli:main"]},
)
