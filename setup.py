from setuptools import find_packages, setup

setup(
    name="assocarray",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    license="MIT License",
    description="A linear-scan associative array backed by a growable list of entries",
    install_requires=["attrs>=22.2.0", "pyrsistent>=0.19.0"],
    extras_require={"test": ["pytest>=7.0"]},
)
