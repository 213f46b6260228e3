import setuptools

setuptools.setup(
	name='rule-dsl',
	version='0.1.0',
	packages=[
		'ruledsl',
	],
	python_requires='>=3.9',
	description='Declarative combinators for describing context-free grammars as plain data',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	extras_require={
		'test': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
    ],
)
