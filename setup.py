import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="gitlog-web",
    version="0.1.0",
    author="gitlog contributors",
    description="Browse git commit logs from the command line or a web terminal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    project_urls={},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        'console_scripts': [
            'gitlog=gitlog.main.main:main',
            'gitlog-server=gitlog.main.main:serve',
        ],
    },
    install_requires=[
        'pygit2>=1.14',
        'typing_extensions',
        'colorama>=0.4.6',
        'fastapi',
        'uvicorn',
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',
        ],
    },
    packages=setuptools.find_packages(include=['gitlog', 'gitlog.*']),
    python_requires=">=3.10",
)
