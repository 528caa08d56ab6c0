from setuptools import setup, find_packages


setup(
    name="pyvcsrepo",
    version="0.1.0",
    description=("Fetch, update and pin repositories under git, svn, hg or bzr through one interface"),
    author="Rob Nelson",
    author_email="nexisentertainment@gmail.com",
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires=">=3.7",
    install_requires=[
        "lxml",
        "pyyaml",
        "jinja2",
        "toml",
        "requests>=2.0",
        'colorama',
    ],
    tests_require=[
        "pytest",
        "mock",
    ],
    extras_require={
        "development": [
            "pylint",
        ],
        "test": [
            "pytest",
            "mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "vcsrepo = vcsrepo.cli:main",
        ],
    },
    license="MIT License",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
    ],
)
