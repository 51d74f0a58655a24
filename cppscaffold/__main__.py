from cppscaffold.cli import main

main()
