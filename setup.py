"""
/setup.py

Shortest Bayesian confidence intervals for binomial efficiencies.
"""

import setuptools

with open("requirements.txt", "r", encoding="utf-8") as file:
    requirements = file.read().splitlines()

setuptools.setup(
    name="efficiency-ci",
    version="0.0.1",
    description="Shortest Bayesian confidence intervals for binomial efficiencies",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "efficiency_ci = efficiency_ci.commands:main",
        ]
    },
)
