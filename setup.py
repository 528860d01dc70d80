from setuptools import setup, find_packages

setup(
    name="pagepilot",
    version="0.1.0",
    description="Client-side page routing for Pyodide single-page applications",
    author="Pagepilot Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "pyodide-py",
    ],
)
