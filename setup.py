from setuptools import setup, find_packages

setup(
    name="a_failover_dns",
    version="0.1.0",
    description="An active failover DNS project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["dnspython>=2.8.0,<3.0.0", "requests>=2.32.0,<3.0.0"],
    extras_require={"test": ["pytest>=8.0.0"]},
    entry_points={
        "console_scripts": ["a-failover-dns = indisoluble.a_failover_dns.main:main"]
    },
)
