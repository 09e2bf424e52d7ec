from setuptools import setup

setup(
    name="nx-spantree",
    version="0.1.0",
    description="Random spanning trees and re-centered tree statistics, with a NetworkX backend",
    packages=["nx_spantree"],
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.2",
        "numpy>=1.21",
        "scipy>=1.9",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "networkx.backends": ["spantree = nx_spantree.backend:backend"],
        "networkx.backend_info": ["spantree = nx_spantree.backend:get_info"],
        "console_scripts": ["nx-spantree = nx_spantree.cli:main"],
    },
)
