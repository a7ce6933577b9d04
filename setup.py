from setuptools import setup, find_packages

setup(
    name='rangepick',
    version='0.1.0',
    description='A date-range picker core: calendar grids, click/hover range selection and month navigation, with a text front-end.',
    author='René Lachmann',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    entry_points={
        'console_scripts': [
            'rangepick=rangepick.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['rangepick.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
