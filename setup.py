from setuptools import find_packages, setup


extras_require = {}

extras_require["test"] = [
    'pytest>=7.0'
]

extras_require["all"] = [
    *extras_require["test"],
]


setup(
    name='syntax-sugar',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*', 'demo']),
    license='MIT',
    description='Syntax sugar examples: initializers, None coalescing, lambdas and lazy queries',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'python-dotenv>=1.0.0,<2.0'
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
