from setuptools import find_packages, setup

setup(
    name="svcctl",
    version="0.1.0",
    description="svcctl - start and force-restart OS background services with bounded waits",
    author="William Wieselquist",
    packages=find_packages(include=["svcctl", "svcctl.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code reads the real click context)
        "click",  # CLI context (Typer dependency used directly)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "psutil",  # Process termination and Windows service queries
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "svcctl=svcctl.cli:main",
        ],
    },
)
