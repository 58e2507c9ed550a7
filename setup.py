from setuptools import find_packages, setup

package_name = "knntree"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        exclude=["tests", "tests.*", "examples"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    zip_safe=True,
    description="A build-once KD-tree with exact k-nearest-neighbor search over any point type",
    license="MIT",
    entry_points={
        "console_scripts": ["knntree=knntree.main:app"],
    },
)
