from setuptools import setup, find_packages

setup(
    name="rfc768",
    version="0.1.0",
    description="RFC 768 UDP datagram codec with checksum engine",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
        "scapy>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rfc768=rfc768_cli.main:cli",
        ],
    },
    python_requires=">=3.8",
)
