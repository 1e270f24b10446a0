"""Reading, validating and writing game score files."""