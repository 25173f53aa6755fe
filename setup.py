from setuptools import setup, find_packages

with open("Readme.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="softaudit",
    version="1.0.0",
    author="SoftAudit",
    description='Inventaire des logiciels installés et export en TXT, CSV, HTML, XML ou JSON.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    include_package_data=True,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"softaudit": ["templates/*.html"]},
    python_requires='>=3.9',
    install_requires=[
        "Jinja2>=3.1.0",
        "configparser>=5.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "dev": [
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },

    entry_points='''
        [console_scripts]
        softaudit=softaudit.main:main
    '''
)
