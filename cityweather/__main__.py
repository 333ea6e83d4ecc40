from cityweather.cli import main

main()
