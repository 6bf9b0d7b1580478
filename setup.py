from setuptools import setup, find_packages

setup(
    name="proxy_auction",
    version="0.1.0",
    description="A proxy-bidding auction engine",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ]
    },
    entry_points={
        "console_scripts": [
            "proxy-auction = proxy_auction.main:main"
        ]
    }
)
