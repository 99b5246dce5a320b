from transferlut.cli.app import main

main()
