from setuptools import find_packages, setup

setup(
    name="mcpathgen",
    version="0.1.0",
    description="Multi-asset Monte Carlo path generation with antithetic variates",
    author="mcpathgen contributors",
    packages=find_packages(include=["mcpathgen", "mcpathgen.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.23",
        "pandas>=1.5",
        "scipy>=1.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    include_package_data=True,
)
