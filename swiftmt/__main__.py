from swiftmt.cli import main

main()
