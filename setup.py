import setuptools

setuptools.setup(
	name='utf8-machine',
	version='0.1.0',
	packages=[
		'utf8machine',
		'utf8machine.automaton',
		'utf8machine.support',
	],
	description='A table-driven, streaming, push-style UTF-8 decoder',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={'test': ['pytest']},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
	],
)
