# Package initialization file
