from projkt.cli import main


main()
